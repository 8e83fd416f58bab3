"""Pytest configuration and shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from todo_app.domain.repositories import TodoRepository
from todo_app.domain.services import TodoService
from todo_app.main import create_app


@pytest.fixture
def repo():
    """Fresh in-memory store for each test"""
    return TodoRepository()


@pytest.fixture
def service(repo):
    return TodoService(repo)


@pytest.fixture
def app(repo):
    return create_app(repository=repo)


@pytest.fixture
def client(app):
    """Create test client"""
    return TestClient(app)
