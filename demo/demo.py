#!/usr/bin/env python3
"""
Demo of the switchboard container.

Shows entry registration, factories, aliases and interface bindings,
constructor autowiring with make(), and method invocation with call().
"""

import logging
from abc import ABC, abstractmethod

from switchboard import Container

logging.basicConfig(level=logging.INFO, format="%(name)s - %(levelname)s - %(message)s")


class Database(ABC):
    @abstractmethod
    def query(self, sql: str) -> str:
        pass


class InMemoryDatabase(Database):
    def __init__(self, dsn: str):
        self.dsn = dsn

    def query(self, sql: str) -> str:
        return f"Executing '{sql}' on {self.dsn}"


class RequestId:
    _next = 0

    def __init__(self):
        RequestId._next += 1
        self.value = RequestId._next


class UserRepository:
    def __init__(self, database: Database, logger: logging.Logger):
        self.database = database
        self.logger = logger

    def find(self, user_id: int) -> str:
        self.logger.info("Looking up user %s", user_id)
        return self.database.query(f"SELECT * FROM users WHERE id = {user_id}")


class UserController:
    def __init__(self, repository: UserRepository, page_size: int = 20):
        self.repository = repository
        self.page_size = page_size

    def show(self, user_id: int, request_id: RequestId) -> str:
        return f"[request {request_id.value}] {self.repository.find(user_id)}"

    def __call__(self) -> str:
        return f"Listing users, {self.page_size} per page"


def main():
    container = Container()

    # Plain values and producers
    container.set("dsn", "memory://demo")
    container.set("database", lambda c: InMemoryDatabase(c.get("dsn")))
    container.interface("database", Database)
    container.alias("database", "db")

    # A factory produces a new value on every lookup
    container.factory(RequestId, lambda: RequestId())

    print("=== Lookups ===")
    print(f"Same database via alias: {container.get('db') is container.get(Database)}")
    print(f"Request ids: {container.get(RequestId).value}, {container.get(RequestId).value}")

    print("\n=== Autowiring ===")
    controller = container.make(UserController, {"page_size": 50})
    print(f"Controller page size: {controller.page_size}")
    print(f"Repository logger: {controller.repository.logger.name}")

    print("\n=== Calling ===")
    print(container.call((UserController, "show"), {"user_id": 7}))
    print(container.call(UserController))

    def report(db: Database, dsn: str) -> str:
        return f"Report from {dsn}: {db.query('SELECT COUNT(*) FROM users')}"

    print(container.call(report))


if __name__ == "__main__":
    main()
