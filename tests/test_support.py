import pytest

from interview_questions.config import load_config
from interview_questions.errors import ConfigError, InvalidInput
from interview_questions.models import (
    CompletionUsage,
    InterviewOptions,
    INTERVIEW_DEFAULT_MODEL,
)
from interview_questions.services.pricing import (
    PRICE_TABLE,
    estimate_cost,
    estimate_tokens_from_text,
    estimate_usage_cost,
    model_options,
)
from interview_questions.services.security import DefaultSecurity, MAX_JD_CHARS
from interview_questions.utils.documents import read_job_description


@pytest.mark.parametrize("cap, expected", [(None, 5), (7, 7), (50, 50), (51, 50)])
def test_options_cap(cap, expected):
    assert InterviewOptions(cap=cap).get_cap() == expected


def test_pricing():
    assert estimate_cost("unknown", 1000, 1000) == 0.0
    assert estimate_cost("babbage-002", 1_000_000, 1_000_000) == pytest.approx(0.8)
    assert estimate_usage_cost("babbage-002", None) == 0.0
    usage = CompletionUsage(prompt_tokens=1_000_000, completion_tokens=0, total_tokens=1_000_000)
    assert estimate_usage_cost("davinci-002", usage) == pytest.approx(2.0)


def test_token_estimate():
    assert estimate_tokens_from_text("   ") == 0
    assert estimate_tokens_from_text("abcdefgh") == 2


def test_security_guards():
    security = DefaultSecurity()
    assert security.sanitize_for_prompt(" Eng\x00ineer ") == "Engineer"
    assert security.sanitize_for_prompt(None) == ""
    assert len(security.validate_job_description_length("x" * (MAX_JD_CHARS + 5))) == MAX_JD_CHARS
    assert security.validate_job_title_length("Engineer") == "Engineer"


CONFIG_VARS = (
    "OPENAI_API_KEY",
    "OPENAI_BASE_URL",
    "INTERVIEW_MODEL",
    "INTERVIEW_TIMEOUT",
    "OPENAI_MAX_RETRIES",
    "LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch):
    # setenv first so teardown also removes values loaded from .env files
    for name in CONFIG_VARS:
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)
    return monkeypatch


def test_load_config_defaults(clean_env, tmp_path):
    config = load_config(str(tmp_path / "missing.env"))

    assert config.openai_api_key == ""
    assert config.model == INTERVIEW_DEFAULT_MODEL
    assert config.timeout == 30.0
    assert config.max_retries == 0
    assert config.log_level == "INFO"


def test_load_config_from_env_file(clean_env, tmp_path):
    env = tmp_path / ".env"
    env.write_text("INTERVIEW_TIMEOUT=12.5\nLOG_LEVEL=debug\n")

    config = load_config(str(env))

    assert config.timeout == 12.5
    assert config.log_level == "DEBUG"


def test_load_config_rejects_bad_numbers(clean_env, tmp_path):
    clean_env.setenv("OPENAI_MAX_RETRIES", "lots")
    with pytest.raises(ConfigError):
        load_config(str(tmp_path / "missing.env"))


def test_read_text_job_description():
    assert read_job_description("jd.txt", b"  Build APIs\n") == "Build APIs"


def test_read_unsupported_job_description():
    with pytest.raises(InvalidInput):
        read_job_description("jd.docx", b"")


def test_read_broken_pdf():
    with pytest.raises(InvalidInput):
        read_job_description("jd.pdf", b"not a pdf")


def test_load_config_ignores_blank_values(clean_env, tmp_path):
    clean_env.setenv("INTERVIEW_MODEL", "")
    clean_env.setenv("INTERVIEW_TIMEOUT", "")

    config = load_config(str(tmp_path / "missing.env"))

    assert config.model == INTERVIEW_DEFAULT_MODEL
    assert config.timeout == 30.0


def test_model_options_keep_configured_model():
    assert model_options("gpt-3.5-turbo-instruct") == list(PRICE_TABLE)
    options = model_options("my-finetuned-instruct")
    assert options[0] == "my-finetuned-instruct"
    assert options[1:] == list(PRICE_TABLE)
