import os

import pytest


@pytest.fixture
def clean_env(monkeypatch):
    # load_dotenv writes into os.environ; give each test a private copy.
    env = {k: v for k, v in os.environ.items() if not k.startswith("DAILYWORD_")}
    monkeypatch.setattr(os, "environ", env)
    return env
