import logging

from cloudvision.logging import logger


def test_package_logger_receives_module_records():
    assert logger.name == "cloudvision"
    assert logger.handlers

    ancestors = []
    current = logging.getLogger("cloudvision.lro.operation").parent
    while current is not None:
        ancestors.append(current)
        current = current.parent
    assert logger in ancestors


def test_module_records_reach_the_package_handler(caplog):
    with caplog.at_level(logging.INFO, logger="cloudvision"):
        logging.getLogger("cloudvision.core.gateway").info("API CALL: call(svc.method) took 0.01 seconds")

    assert [record.name for record in caplog.records] == ["cloudvision.core.gateway"]
