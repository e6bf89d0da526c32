"""
Unit Tests for Credit Reward Settings

Tests cover:
1. Defaults
2. Loading options from the environment
3. Remark fallback to the campaign name
"""

from campaign_credit.config import CreditRewardSettings
from campaign_credit.models import Campaign


CAMPAIGN = Campaign(id=3, name="Summer Campaign")


class TestCreditRewardSettings:
    """Tests for settings defaults and environment loading."""

    def test_defaults(self):
        settings = CreditRewardSettings()
        assert settings.default_currency_code == "CREDIT"
        assert settings.award_credit_remark is None
        assert settings.remark_for(CAMPAIGN) == "Summer Campaign"

    def test_from_env_empty(self):
        settings = CreditRewardSettings.from_env({})
        assert settings == CreditRewardSettings()

    def test_from_env_overrides(self):
        settings = CreditRewardSettings.from_env({
            "DEFAULT_CREDIT_CURRENCY_CODE": "POINTS",
            "CAMPAIGN_AWARD_CREDIT_REMARK": "Custom Remark",
        })
        assert settings.default_currency_code == "POINTS"
        assert settings.remark_for(CAMPAIGN) == "Custom Remark"

    def test_empty_remark_counts_as_set(self):
        settings = CreditRewardSettings.from_env({"CAMPAIGN_AWARD_CREDIT_REMARK": ""})
        assert settings.remark_for(CAMPAIGN) == ""

    def test_from_process_environment(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_CREDIT_CURRENCY_CODE", "GOLD")
        monkeypatch.delenv("CAMPAIGN_AWARD_CREDIT_REMARK", raising=False)

        settings = CreditRewardSettings.from_env()

        assert settings.default_currency_code == "GOLD"
        assert settings.award_credit_remark is None
