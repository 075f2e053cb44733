import pytest
from pydantic import ValidationError

from subscription_gateway import main
from subscription_gateway.config import Settings


def test_cors_origins_from_comma_separated_env(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example,")
    policy = Settings(_env_file=None).cors
    assert policy.allowed_origins == frozenset({"https://a.example", "https://b.example"})
    assert policy.credentials is True


def test_vercel_env_enables_serverless(monkeypatch):
    monkeypatch.setenv("VERCEL", "1")
    assert Settings(_env_file=None).serverless is True


def test_serverless_off_by_default(monkeypatch):
    monkeypatch.delenv("VERCEL", raising=False)
    monkeypatch.delenv("SERVERLESS", raising=False)
    assert Settings(_env_file=None).serverless is False


def test_supabase_secret_key_alias(monkeypatch):
    monkeypatch.setenv("SUPABASE_SECRET_KEY", "service-role")
    settings = Settings(_env_file=None)
    assert settings.supabase_service_key.get_secret_value() == "service-role"


def test_unknown_plan_policy_validated():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, unknown_plan_policy="annual")


def test_database_url_must_be_postgres_or_sqlite():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, database_url="mysql://localhost/db")


def test_api_prefix_requires_leading_slash():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, api_prefix="api")


def test_run_skips_listener_in_serverless_mode(monkeypatch):
    started = []
    monkeypatch.setattr(main, "get_settings", lambda: Settings(_env_file=None, serverless=True))
    monkeypatch.setattr(main.uvicorn, "run", lambda *args, **kwargs: started.append(kwargs))
    main.run()
    assert started == []


def test_run_starts_listener(monkeypatch):
    started = []
    monkeypatch.setattr(
        main, "get_settings", lambda: Settings(_env_file=None, serverless=False, port=4000)
    )
    monkeypatch.setattr(main.uvicorn, "run", lambda *args, **kwargs: started.append(kwargs))
    main.run()
    assert started == [{"host": "0.0.0.0", "port": 4000}]
