"""SubmissionService 单元测试。

测试覆盖:
- 成功流程：评分、发送邮件、注册联系人
- 两步通知的顺序与短路
- 请求体解析失败
"""

import logging

import pytest

from two_iron.services.submission_service import (
    GENERIC_FAILURE_MESSAGE,
    SubmissionService,
    SubmissionStage,
)


class TestSubmissionSuccess:
    """测试提交成功流程。"""

    def test_returns_recommendation(self, mock_email, strong_payload):
        """测试成功时返回推荐结果。"""
        service = SubmissionService(email_service=mock_email)

        result = service.submit(strong_payload)

        assert result.success is True
        assert result.failed_stage is None
        assert result.recommendation.confidence_score == 19
        assert result.to_dict() == {
            "success": True,
            "recommendation": result.recommendation.to_dict(),
        }

    def test_calls_are_sequential(self, mock_email, strong_payload):
        """测试先发推荐邮件，再注册联系人。"""
        service = SubmissionService(email_service=mock_email)

        service.submit(strong_payload)

        assert mock_email.call_names == ["send_recommendation", "schedule_follow_up"]
        assert mock_email.calls[0][1:3] == ("Alice Zhang", "alice@example.com")
        assert mock_email.calls[1][1:] == ("alice@example.com", "Alice Zhang")

    def test_no_server_side_validation(self, mock_email):
        """测试空答案也会得到推荐（不做服务端校验）。"""
        service = SubmissionService(email_service=mock_email)

        result = service.submit({})

        assert result.success is True
        assert result.recommendation.is_recommended is False

    def test_mistyped_fields_still_succeed(self, mock_email):
        """测试字段类型错误时按空值或文本处理，流程照常完成。"""
        service = SubmissionService(email_service=mock_email)

        result = service.submit({"currentStruggles": "all of them", "handicap": 5, "name": None})

        assert result.success is True
        assert mock_email.call_names == ["send_recommendation", "schedule_follow_up"]


class TestSubmissionFailure:
    """测试提交失败处理。"""

    def test_email_failure_skips_follow_up(self, mock_email, strong_payload):
        """测试推荐邮件失败时不注册联系人。"""
        mock_email.fail_on = "send_recommendation"
        service = SubmissionService(email_service=mock_email)

        result = service.submit(strong_payload)

        assert result.success is False
        assert result.recommendation is None
        assert result.failed_stage is SubmissionStage.SEND_RECOMMENDATION
        assert mock_email.call_names == ["send_recommendation"]

    def test_follow_up_failure(self, mock_email, strong_payload):
        """测试联系人注册失败时整体失败。"""
        mock_email.fail_on = "schedule_follow_up"
        service = SubmissionService(email_service=mock_email)

        result = service.submit(strong_payload)

        assert result.success is False
        assert result.recommendation is None
        assert result.failed_stage is SubmissionStage.SCHEDULE_FOLLOW_UP
        assert isinstance(result.error, ConnectionError)

    @pytest.mark.parametrize("payload", [None, [], "answers", 42])
    def test_parse_failure(self, mock_email, payload):
        """测试请求体无法解析时不发送任何邮件。"""
        service = SubmissionService(email_service=mock_email)

        result = service.submit(payload)

        assert result.success is False
        assert result.failed_stage is SubmissionStage.PARSE_ANSWERS
        assert mock_email.calls == []

    def test_failure_response_is_generic(self, mock_email, strong_payload):
        """测试失败时响应体只包含通用错误信息。"""
        mock_email.fail_on = "send_recommendation"
        service = SubmissionService(email_service=mock_email)

        result = service.submit(strong_payload)

        assert result.to_dict() == {"success": False, "error": GENERIC_FAILURE_MESSAGE}

    def test_failed_stage_is_logged(self, mock_email, strong_payload, caplog):
        """测试日志中能区分失败的步骤。"""
        mock_email.fail_on = "schedule_follow_up"
        service = SubmissionService(email_service=mock_email)

        with caplog.at_level(logging.ERROR, logger="two_iron.services.submission_service"):
            service.submit(strong_payload)

        assert "schedule_follow_up failed" in caplog.text
