"""Pytest configuration and fixtures."""

import os

os.environ.setdefault("FLASK_ENV", "testing")

import pytest

from ai_readiness.assessment import AssessmentEngine, AssessmentSession, OrganizationProfile


def pick_value(weighted_question, preferred):
    """Closest valid option value to the preferred one."""
    values = weighted_question.question.option_values
    return min(values, key=lambda v: abs(v - preferred))


def answer_all(session, preferred, max_steps=100):
    """Answer every question in order and advance until the session completes."""
    for _ in range(max_steps):
        if session.is_complete:
            return session
        question = session.current_question
        session.set_answer(question.id, pick_value(question, preferred))
        session.advance()
    raise AssertionError("Session did not complete")


@pytest.fixture
def tech_enterprise():
    return OrganizationProfile(industry="technology", company_size="enterprise")


@pytest.fixture
def healthcare_small():
    return OrganizationProfile(industry="healthcare", company_size="small")


@pytest.fixture
def engine():
    return AssessmentEngine()


@pytest.fixture
def session():
    return AssessmentSession()


@pytest.fixture
def purge_session():
    return AssessmentSession(retain_answered=False)


@pytest.fixture
def app():
    from config.settings import TestingConfig
    from web.app import create_app

    return create_app(TestingConfig)


@pytest.fixture
def client(app):
    return app.test_client()
