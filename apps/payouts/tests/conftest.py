import pytest
from django.db import connection


@pytest.fixture
def install_db_function(db):
    """Register Python functions as SQL functions on the sqlite test connection"""
    if connection.vendor != 'sqlite':
        pytest.skip("database fee functions are only faked on sqlite")

    installed = []

    def install(name, num_params, function):
        connection.ensure_connection()
        connection.connection.create_function(name, num_params, function)
        installed.append((name, num_params))

    yield install
    for name, num_params in installed:
        connection.connection.create_function(name, num_params, None)
