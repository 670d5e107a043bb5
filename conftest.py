# conftest.py
import pytest

from pets_api import create_app

@pytest.fixture
def app():
    """메모리 저장소를 쓰는 테스트용 Flask 앱."""
    app = create_app('testing')
    yield app
    app.services['store'].close()

@pytest.fixture
def client(app):
    return app.test_client()

@pytest.fixture
def store(app):
    return app.services['store']
