"""
Proxy: a stand-in that controls access to the real object, here by caching.
"""

from typing import Optional

from loguru import logger

from studykit.utils.registry import register_demo


class DBOperation:
    def fetch_data(self) -> str:
        logger.info("Fetching data from the server...")
        return "Data from server"


class ProxyOperation:
    def __init__(self, real_operation: Optional[DBOperation] = None):
        self.real_operation = real_operation or DBOperation()
        self.cache: Optional[str] = None

    def fetch_data(self) -> str:
        if self.cache is None:
            self.cache = self.real_operation.fetch_data()
        else:
            logger.info("Returning cached data...")
        return self.cache


@register_demo("proxy")
def demo():
    logger.info(DBOperation().fetch_data())

    proxy_op = ProxyOperation()
    logger.info(proxy_op.fetch_data())
    logger.info(proxy_op.fetch_data())


if __name__ == "__main__":
    demo()
