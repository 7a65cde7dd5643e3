import logging
import os
import unittest

import pytest
try:
    import pymysql  # noqa
    assert pymysql  # quiets unused import warning
except ImportError:
    pytest.skip("pymysql not installed, skipping MySQL tests",
            allow_module_level=True)

from . import graph_case
from . import store_case


if os.environ.get("DB") != "mysql":
    pytest.skip("MySQL not under test", allow_module_level=True)

sqlalchemy_url = os.environ.get(
    "DBURI",
    "mysql+pymysql://root@localhost:3306/test?charset=utf8mb4")

_logger = logging.getLogger(__name__)


class MySQLStoreTestCase(store_case.StoreTestCase):
    storetest = True
    uri = sqlalchemy_url


class MySQLPrefixedStoreTestCase(store_case.PrefixedStoreTestCase):
    storetest = True
    uri = sqlalchemy_url


class MySQLGraphTestCase(graph_case.GraphTestCase):
    storetest = True
    storename = "DataObjects"
    uri = sqlalchemy_url

    def setUp(self):
        super(MySQLGraphTestCase, self).setUp(
            uri=self.uri, storename=self.storename)

    def tearDown(self):
        super(MySQLGraphTestCase, self).tearDown(uri=self.uri)


if __name__ == "__main__":
    unittest.main()
