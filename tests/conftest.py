import pytest

from baseline_checker.catalog import default_catalog
from baseline_checker.main_checker import BaselineChecker


@pytest.fixture
def catalog():
    return default_catalog()


@pytest.fixture
def checker(catalog):
    return BaselineChecker(catalog)
