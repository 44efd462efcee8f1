from attack_data_model.logger import LOGGER_NAME, get_logger


def test_get_logger_should_return_a_cached_structured_logger():
    """Test that the package logger is a pycti structured logger, built once."""
    # Given the package logger
    logger = get_logger()
    # When getting it again
    # Then the same logger should be returned, with the structured logging methods
    assert get_logger() is logger
    assert logger.local_logger.name == LOGGER_NAME
    for method in ("debug", "info", "warning"):
        assert callable(getattr(logger, method))
