import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

SMARTDOC_ENV_VARS = [
    "SMARTDOC_API_KEY",
    "OPENAI_API_KEY",
    "SMARTDOC_MODEL",
    "SMARTDOC_SERVICES_FOLDER",
    "SMARTDOC_EXTENSION",
    "SMARTDOC_MAX_TOKENS",
    "SMARTDOC_TEMPERATURE",
    "OLLAMA_BASE_URL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # setenv first so monkeypatch also removes values a .env file loads mid-test
    for name in SMARTDOC_ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture
def services_dir(tmp_path):
    d = tmp_path / "services"
    d.mkdir()
    (d / "userService.js").write_text(
        "class UserService {\n"
        "getUser(id) {\n"
        "  return this.cache[id];\n"
        "}\n"
        "\n"
        "async getUser(id) {\n"
        "  return db.users.findById(id);\n"
        "}\n"
        "\n"
        "async deleteUser(id) {\n"
        "  await db.users.remove(id);\n"
        "}\n"
        "}\n",
        encoding="utf-8",
    )
    return d
