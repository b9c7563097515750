import logging

from staffdesk.core.logging import PIISafeFilter


def _filtered_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)
    logger.filters = []
    logger.addFilter(PIISafeFilter())
    return logger


def test_pii_filter_redacts_nic_numbers(caplog):
    logger = _filtered_logger("test.nic")

    with caplog.at_level(logging.INFO, logger="test.nic"):
        logger.info("Converted 741922757V to 197419202757")

    assert "741922757V" not in caplog.text
    assert "197419202757" not in caplog.text
    assert caplog.text.count("[REDACTED]") == 2


def test_pii_filter_redacts_email_and_phone(caplog):
    logger = _filtered_logger("test.contact")

    with caplog.at_level(logging.INFO, logger="test.contact"):
        logger.info("Contact sunil.perera@example.lk on 0771234567 or +94717654321")

    assert "sunil.perera@example.lk" not in caplog.text
    assert "0771234567" not in caplog.text
    assert "+94717654321" not in caplog.text


def test_pii_filter_redacts_nic_assignment(caplog):
    logger = _filtered_logger("test.assignment")

    with caplog.at_level(logging.INFO, logger="test.assignment"):
        logger.info("rejected nic_number=74-1922757V for record %s", "DFO/001")

    assert "74-1922757V" not in caplog.text
    assert "nic_number=[REDACTED]" in caplog.text
    assert "DFO/001" in caplog.text


def test_pii_filter_redacts_arguments(caplog):
    logger = _filtered_logger("test.args")

    with caplog.at_level(logging.INFO, logger="test.args"):
        logger.info("Lookup for %s", "916980123V")

    assert "916980123V" not in caplog.text


def test_pii_filter_keeps_record_ids(caplog):
    logger = _filtered_logger("test.ids")

    with caplog.at_level(logging.INFO, logger="test.ids"):
        logger.info("Staff record created (id=%d)", 42)

    assert "Staff record created (id=42)" in caplog.text
