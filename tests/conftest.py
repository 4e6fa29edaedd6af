# tests/conftest.py
import io
import numpy as np
import pytest
from PIL import Image
from mangrove_backend import create_app
from mangrove_backend.repositories.model_repository import ModelRepository

class FakeModel:
    """Stands in for a Keras model: returns fixed scores and records its inputs."""

    def __init__(self, scores):
        self.scores = scores
        self.batches = []

    def predict(self, batch, verbose=0):
        self.batches.append(batch)
        return np.asarray([self.scores], dtype=np.float32)

class FakeLoader:
    def __init__(self, model):
        self.model = model
        self.calls = 0

    def __call__(self, location):
        self.calls += 1
        return self.model

def make_image(mode='RGB', size=(200, 120), color=(10, 200, 30), fmt='PNG'):
    buf = io.BytesIO()
    Image.new(mode, size, color).save(buf, format=fmt)
    return buf.getvalue()

@pytest.fixture
def fake_model():
    return FakeModel([0.05, 0.1, 0.05, 0.6, 0.05, 0.05, 0.05, 0.05])

@pytest.fixture
def fake_loader(fake_model):
    return FakeLoader(fake_model)

@pytest.fixture
def app(tmp_path, fake_loader):
    repository = ModelRepository('fake://model.keras', loader=fake_loader)
    app = create_app({
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': f"sqlite:///{tmp_path / 'test.sqlite'}",
        'SECRET_KEY': 'test-secret',
        'BCRYPT_ROUNDS': 4,
    }, model_repository=repository)
    yield app

@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client

@pytest.fixture
def admin_client(client):
    response = client.post('/login', data={'username': 'admin', 'password': 'admin'})
    assert response.status_code == 302
    return client
