import pytest
from pydantic import ValidationError

from subscriptions_api.config import Settings


def test_database_url_is_composed_from_parts_when_absent(monkeypatch):
    monkeypatch.delenv('DATABASE_URL', raising=False)
    settings = Settings(
        _env_file=None,
        DB_HOST='db.internal',
        DB_PORT=6543,
        DB_USER='svc',
        DB_PASSWORD='s3cret',
        DB_NAME='subs',
    )
    url = settings.sqlalchemy_url
    assert url.drivername == 'postgresql+psycopg2'
    assert url.host == 'db.internal'
    assert url.port == 6543
    assert url.username == 'svc'
    assert url.password == 's3cret'
    assert url.database == 'subs'
    assert url.query['sslmode'] == 'disable'


def test_explicit_database_url_wins():
    settings = Settings(_env_file=None, DATABASE_URL='postgresql://u:p@host:5432/db')
    assert settings.sqlalchemy_url == 'postgresql://u:p@host:5432/db'


def test_database_url_rejects_other_backends():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, DATABASE_URL='mysql://u:p@host/db')


def test_api_prefix_is_normalized():
    assert Settings(_env_file=None, API_V1_PREFIX='/api/v2/').api_v1_prefix == '/api/v2'
    with pytest.raises(ValidationError):
        Settings(_env_file=None, API_V1_PREFIX='api')


def test_cors_origins_from_comma_separated_env(monkeypatch):
    monkeypatch.setenv('CORS_ORIGINS', 'http://a.test, http://b.test')
    assert Settings(_env_file=None).cors_origins == ['http://a.test', 'http://b.test']
