from http import HTTPStatus

import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from query_builder import AllowedSort, QueryBuilder
from query_builder.api import query_builder_params
from query_builder.exception_handlers import add_exception_handlers


@pytest.fixture
def test_client(db_session, user_table):
    app = FastAPI()
    add_exception_handlers(app)

    @app.get("/params")
    async def params(params: dict = Depends(query_builder_params)) -> dict:
        return params

    @app.get("/users")
    async def users(params: dict = Depends(query_builder_params)) -> dict:
        builder = (
            QueryBuilder.for_model(user_table, db_session)
            .allowed_sorts("name", "age", AllowedSort.field("email", "email_address"))
            .default_sort("age", "name")
            .apply_sorts(params)
        )
        if "page" in params:
            page = await builder.paginate(int(params["page"]), 2)
            return {"data": [user.name for user in page.data], "total": page.total, "page": page.page}
        return {"data": [user.name for user in await builder.get()]}

    return TestClient(app)


@pytest.mark.parametrize(
    "query_string, expected",
    [
        ("", {}),
        ("sort=name", {"sort": "name"}),
        ("sort=name,-age", {"sort": "name,-age"}),
        ("sort=name&sort=-age&page=2", {"sort": ["name", "-age"], "page": "2"}),
    ],
)
def test_query_builder_params(test_client, query_string, expected):
    response = test_client.get(f"/params?{query_string}")

    assert response.status_code == HTTPStatus.OK
    assert response.json() == expected


@pytest.mark.parametrize(
    "query_string, expected",
    [
        ("", ["Dave", "Alice", "Bob", "Charlie"]),
        ("sort=-name", ["Dave", "Charlie", "Bob", "Alice"]),
        ("sort=-age,email", ["Charlie", "Alice", "Bob", "Dave"]),
        ("sort=age&sort=-name", ["Dave", "Bob", "Alice", "Charlie"]),
    ],
)
def test_sorted_users(test_client, query_string, expected):
    response = test_client.get(f"/users?{query_string}")

    assert response.status_code == HTTPStatus.OK
    assert response.json() == {"data": expected}


def test_paginated_users(test_client):
    response = test_client.get("/users?sort=name&page=2")

    assert response.status_code == HTTPStatus.OK
    assert response.json() == {"data": ["Charlie", "Dave"], "total": 4, "page": 2}


def test_invalid_sort(test_client):
    response = test_client.get("/users?sort=password,-name,secret")

    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert response.json() == {
        "detail": "Requested sort(s) 'password, secret' are not allowed. Allowed sort(s) are: name, age, email",
        "status": 400,
        "title": "Invalid sort query",
        "unknown_sorts": ["password", "secret"],
        "allowed_sorts": ["name", "age", "email"],
    }
