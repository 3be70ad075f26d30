from liftlog.settings import Settings, get_settings

def test_postgres_url_assembled_from_parts():
    s = Settings(DATABASE_URL=None, DB_HOST="pg", DB_PORT=6543, DB_USER="lift", DB_PASSWORD="pw", DB_NAME="logs")
    assert s.SQLALCHEMY_URL == "postgresql+psycopg://lift:pw@pg:6543/logs"

def test_database_url_override_wins():
    s = Settings(DATABASE_URL="sqlite:///./x.db", DB_HOST="ignored")
    assert s.SQLALCHEMY_URL == "sqlite:///./x.db"

def test_origins_split_and_trimmed():
    s = Settings(ALLOW_ORIGINS="http://a.test, http://b.test,")
    assert s.origins == ["http://a.test", "http://b.test"]

def test_defaults():
    s = Settings(DATABASE_URL=None)
    assert s.LAST_WEIGHTS_WINDOW == 10
    assert s.DB_PORT == 5432

def test_get_settings_is_cached():
    assert get_settings() is get_settings()
