"""Тест модуля config"""
from vet_vax.config import (
    VetVaxConfig,
    get_default_config,
    load_config,
    save_config,
)


def test_defaults():
    config = get_default_config()

    assert config.processing.chunk_size == 100
    assert config.extraction.fuzzy_match_threshold == 0.8
    assert config.extraction.confidence_cap == 0.95
    assert config.cache.min_summary_confidence == 0.7
    assert config.store.records_path is None


def test_from_dict_partial():
    """Відсутні секції беруться за замовчуванням"""
    config = VetVaxConfig.from_dict({
        "processing": {"chunk_size": 10},
        "log_level": "DEBUG",
    })

    assert config.processing.chunk_size == 10
    assert config.processing.progress_log_threshold == 500
    assert config.extraction.min_pattern_frequency == 2
    assert config.log_level == "DEBUG"


def test_yaml_round_trip(tmp_path):
    config = VetVaxConfig.from_dict({
        "extraction": {"billing_confidence": 0.9},
        "store": {"records_path": "data/records.json"},
    })
    path = tmp_path / "configs" / "vetvax.yaml"

    save_config(config, str(path))
    loaded = load_config(str(path))

    assert loaded == config


def test_setup_logging_once(tmp_path):
    """Обробники підключаються лише один раз"""
    import logging
    from vet_vax.logging_config import LOGGER_NAME, setup_logging

    logger = logging.getLogger(LOGGER_NAME)
    saved = list(logger.handlers)
    logger.handlers.clear()
    try:
        setup_logging("DEBUG", log_file=str(tmp_path / "logs" / "vet_vax.log"))
        setup_logging("INFO")

        assert len(logger.handlers) == 2
        assert logger.level == logging.INFO
        assert (tmp_path / "logs" / "vet_vax.log").exists()
    finally:
        for handler in logger.handlers:
            handler.close()
        logger.handlers[:] = saved
        logger.setLevel(logging.NOTSET)


def test_setup_logging_adds_file_later(tmp_path):
    """Файловий обробник додається при повторному виклику"""
    import logging
    from vet_vax.logging_config import LOGGER_NAME, setup_logging

    logger = logging.getLogger(LOGGER_NAME)
    saved = list(logger.handlers)
    logger.handlers.clear()
    log_file = str(tmp_path / "vet_vax.log")
    try:
        setup_logging("INFO")
        assert len(logger.handlers) == 1

        setup_logging("DEBUG", log_file=log_file)
        setup_logging("DEBUG", log_file=log_file)

        assert len(logger.handlers) == 2
        assert logger.level == logging.DEBUG
    finally:
        for handler in logger.handlers:
            handler.close()
        logger.handlers[:] = saved
        logger.setLevel(logging.NOTSET)


def demo():
    print("=" * 50)
    print("VetVax — Тест конфігурації")
    print("=" * 50)

    config = get_default_config()

    print(f"Версія: {config.version}")
    print(f"Chunk size: {config.processing.chunk_size}")
    print(f"Fuzzy threshold: {config.extraction.fuzzy_match_threshold}")
    print(f"Summary confidence: {config.cache.min_summary_confidence}")

    print("=" * 50)
    print("✅ Успішно!")


if __name__ == "__main__":
    demo()
