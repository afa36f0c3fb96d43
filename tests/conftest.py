"""测试配置和共享 Fixtures。"""

from datetime import datetime, timezone

import pytest

from two_iron.models import IronDistances, QuestionnaireAnswers


# ============================================================================
# Mock Services
# ============================================================================

class MockEmailService:
    """测试用 Mock 邮件服务。

    记录每次调用；通过 fail_on 指定在哪一步抛出异常。
    """

    def __init__(self):
        self.calls = []
        self.fail_on = None  # "send_recommendation" | "schedule_follow_up"

    def send_recommendation(self, name, email, recommendation, answers):
        self.calls.append(("send_recommendation", name, email, recommendation))
        if self.fail_on == "send_recommendation":
            raise ConnectionError("Mock network failure")

    def schedule_follow_up(self, email, name):
        self.calls.append(("schedule_follow_up", email, name))
        if self.fail_on == "schedule_follow_up":
            raise ConnectionError("Mock network failure")

    @property
    def call_names(self):
        return [c[0] for c in self.calls]


class RecordingSink:
    """收集 analytics 事件的 sink。"""

    def __init__(self):
        self.events = []

    def __call__(self, record):
        self.events.append(record)

    @property
    def names(self):
        return [e["event"] for e in self.events]


# ============================================================================
# Answer Fixtures
# ============================================================================

@pytest.fixture
def strong_answers() -> QuestionnaireAnswers:
    """高分球员：应推荐 2 号铁。"""
    return QuestionnaireAnswers(
        name="Alice Zhang",
        email="alice@example.com",
        handicap="Scratch or better",
        experience="10+ years",
        height="5'10\"",
        strength="I could probably fight a bear",
        swing_speed="110 mph",
        iron_distances=IronDistances(seven_iron="175", four_iron="210"),
        playing_style="Aggressive - I'm here for a good time, not a long time",
        current_struggles=("Want more shot shape options",),
        practice_frequency="Daily grinder",
    )


@pytest.fixture
def beginner_answers() -> QuestionnaireAnswers:
    """初学者：不推荐，建议 hybrid。"""
    return QuestionnaireAnswers(
        name="Bob Li",
        email="bob@example.com",
        handicap="Beginner (30+)",
        experience="Less than 1 year",
        height="6'0\"",
        strength="I struggle with long irons",
        iron_distances=IronDistances(seven_iron="120"),
        playing_style="Balanced - I mix it up depending on the situation",
        practice_frequency="Special occasions only",
    )


@pytest.fixture
def strong_payload(strong_answers) -> dict:
    """高分球员的 JSON 请求体。"""
    return strong_answers.to_dict()


# ============================================================================
# Service Fixtures
# ============================================================================

@pytest.fixture
def mock_email() -> MockEmailService:
    """创建 Mock 邮件服务。"""
    return MockEmailService()


@pytest.fixture
def sink() -> RecordingSink:
    """创建记录事件的 analytics sink。"""
    return RecordingSink()


@pytest.fixture
def fixed_clock():
    """固定时间，便于断言 ASSESSMENT_DATE。"""
    moment = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)
    return lambda: moment
