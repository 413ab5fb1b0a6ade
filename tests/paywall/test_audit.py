"""
Unit-тесты для record_decision / record_article: лог + метрика.
"""
import unittest
from unittest.mock import patch

from app.paywall.audit import record_article, record_decision
from app.paywall.decision import decide


class TestRecordDecision(unittest.TestCase):
    @patch("app.paywall.audit.paywall_decisions_total")
    def test_counts_by_result(self, mock_counter):
        record_decision(decide("premium-kittens", "anon"))
        mock_counter.labels.assert_called_once_with(result="BLOCK")
        mock_counter.labels.return_value.inc.assert_called_once()

    def test_logs_decision_fields(self):
        with self.assertLogs("app.paywall.audit", level="INFO") as captured:
            record_decision(decide("free-article", "user-1"))
        record = captured.records[0]
        self.assertEqual(record.getMessage(), "paywall_decision")
        self.assertEqual(record.article_id, "free-article")
        self.assertEqual(record.session_id, "user-1")
        self.assertEqual(record.decision, "ALLOW")

    @patch("app.paywall.audit.article_requests_total")
    def test_record_article(self, mock_counter):
        with self.assertLogs("app.paywall.audit", level="INFO") as captured:
            record_article("kittens", "http://svc/paywall?articleid=premium-kittens")
        mock_counter.inc.assert_called_once()
        self.assertEqual(captured.records[0].paywall, "http://svc/paywall?articleid=premium-kittens")
