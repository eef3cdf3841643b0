from interview_questions.prompts import DefaultPromptFactory, build_interview_prompt
from interview_questions.utils.text import normalize_input, trim_str


def test_title_only():
    assert (
        build_interview_prompt("Senior Engineer", "")
        == "Create a list of questions for my interview with a Senior Engineer"
    )


def test_description_only():
    assert (
        build_interview_prompt("", "building modern APIs")
        == "Create a list of questions for my interview with a job description of building modern APIs"
    )


def test_title_and_description():
    assert (
        build_interview_prompt("Data Engineer", "Spark and Airflow pipelines")
        == "Create a list of questions for my interview with a Data Engineer, Spark and Airflow pipelines"
    )


def test_both_empty_gives_empty_prompt():
    assert build_interview_prompt("", "") == ""


def test_inputs_are_normalized_before_composition():
    prompt = DefaultPromptFactory().build_prompt("Backend\nEngineer", "• Python\r\n• SQL")
    assert prompt == (
        "Create a list of questions for my interview with a Backend Engineer,  Python  SQL"
    )


def test_normalize_keeps_double_space():
    assert normalize_input("Backend\r\nEngineer • Lead") == "Backend Engineer  Lead"


def test_normalize_collapses_each_line_break_once():
    assert normalize_input("a\n\nb") == "a  b"


def test_trim_str():
    assert trim_str(None) == ""
    assert trim_str("  Engineer \n") == "Engineer"
