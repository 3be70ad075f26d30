"""
Point the app at a throwaway SQLite file before anything imports liftlog.db,
then build the schema once for the whole test session.
"""
import os
import tempfile

import pytest

_tmpdir = tempfile.mkdtemp(prefix="liftlog-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_tmpdir, 'test.db')}"

from liftlog.db import Base, engine  # noqa: E402
from liftlog import models  # noqa: E402,F401


@pytest.fixture(scope="session", autouse=True)
def schema():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()
