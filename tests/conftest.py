"""Shared fixtures"""
import pytest
from fastapi.testclient import TestClient
from todo_api.main import create_app
from todo_api.application.use_cases.todo_use_cases import TodoUseCases
from todo_api.infrastructure.repositories.todo_repository_impl import TodoRepositoryImpl


@pytest.fixture
def repository():
    return TodoRepositoryImpl()


@pytest.fixture
def use_cases(repository):
    return TodoUseCases(repository)


@pytest.fixture
def client(repository):
    with TestClient(create_app(repository)) as test_client:
        yield test_client
