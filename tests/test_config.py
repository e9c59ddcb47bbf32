from freelancer_platform.core.config import Settings

ENV_NAMES = ("DATABASE_URL", "MONGODB_URI", "MONGODB_URL", "JWT_SECRET", "SECRET_KEY", "PORT", "ALLOW_ADMIN_SIGNUP")


def clean_env(monkeypatch):
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


def test_defaults(monkeypatch):
    clean_env(monkeypatch)
    s = Settings(_env_file=None)
    assert s.DATABASE_URL == "sqlite:///./freelancer_platform.db"
    assert s.ACCESS_TOKEN_EXPIRE_MINUTES == 60 * 24 * 7
    assert s.ALLOW_ADMIN_SIGNUP is False
    assert s.PORT == 5000


def test_jwt_secret_sets_secret_key(monkeypatch):
    clean_env(monkeypatch)
    monkeypatch.setenv("JWT_SECRET", "from-jwt-secret")
    assert Settings(_env_file=None).SECRET_KEY == "from-jwt-secret"


def test_mongodb_uri_sets_database_url(monkeypatch):
    clean_env(monkeypatch)
    monkeypatch.setenv("MONGODB_URI", "sqlite:///./from-uri.db")
    assert Settings(_env_file=None).DATABASE_URL == "sqlite:///./from-uri.db"


def test_mongodb_url_sets_database_url(monkeypatch):
    clean_env(monkeypatch)
    monkeypatch.setenv("MONGODB_URL", "postgresql+psycopg://u:p@db/app")
    assert Settings(_env_file=None).DATABASE_URL == "postgresql+psycopg://u:p@db/app"


def test_database_url_takes_precedence(monkeypatch):
    clean_env(monkeypatch)
    monkeypatch.setenv("DATABASE_URL", "sqlite:///./primary.db")
    monkeypatch.setenv("MONGODB_URI", "sqlite:///./secondary.db")
    assert Settings(_env_file=None).DATABASE_URL == "sqlite:///./primary.db"


def test_port_and_flags_from_env(monkeypatch):
    monkeypatch.setenv("PORT", "8081")
    monkeypatch.setenv("ALLOW_ADMIN_SIGNUP", "true")
    s = Settings(_env_file=None)
    assert s.PORT == 8081
    assert s.ALLOW_ADMIN_SIGNUP is True
