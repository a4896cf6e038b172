"""Dashboard statistics tests."""

import pytest

from agency.schemas import AgentFeedback
from agency.services.stats import (
    calculate_port_agent_stats,
    calculate_shipping_line_stats,
    summarize_agent_feedback,
)


@pytest.mark.unit
@pytest.mark.stats
class TestShippingLineStats:

    def test_mixed_lines(self, make_shipping_line):
        """Inactive lines are left out of every figure."""
        lines = [
            make_shipping_line(is_active=True, is_preferred=True, service_rating=4, credit_limit=1000),
            make_shipping_line(is_active=True, is_preferred=False, service_rating=None, credit_limit=500),
            make_shipping_line(is_active=False, is_preferred=True, service_rating=5, credit_limit=9999),
        ]
        stats = calculate_shipping_line_stats(lines)

        assert stats.total_lines == 2
        assert stats.preferred_count == 1
        assert stats.average_rating == 4.0
        assert stats.total_credit_limit == 1500

    def test_empty(self):
        stats = calculate_shipping_line_stats([])
        assert stats.total_lines == 0
        assert stats.preferred_count == 0
        assert stats.average_rating == 0
        assert stats.total_credit_limit == 0

    def test_only_inactive(self, make_shipping_line):
        lines = [make_shipping_line(is_active=False, service_rating=3, credit_limit=10)] * 3
        stats = calculate_shipping_line_stats(lines)
        assert stats.model_dump() == {
            "total_lines": 0,
            "preferred_count": 0,
            "average_rating": 0.0,
            "total_credit_limit": 0.0,
        }

    def test_no_ratings_gives_zero_average(self, make_shipping_line):
        lines = [make_shipping_line(credit_limit=None) for _ in range(4)]
        stats = calculate_shipping_line_stats(lines)
        assert stats.total_lines == 4
        assert stats.average_rating == 0
        assert stats.total_credit_limit == 0

    @pytest.mark.parametrize("ratings, expected", [
        ([4.5, 4, 3], 3.83),
        ([1, 2, 2], 1.67),
        ([3.125, 3.125], 3.13),  # half rounds up
        ([5], 5.0),
    ])
    def test_average_rounded_to_two_places(self, make_shipping_line, ratings, expected):
        lines = [make_shipping_line(service_rating=r) for r in ratings]
        assert calculate_shipping_line_stats(lines).average_rating == expected

    def test_accepts_generator(self, make_shipping_line):
        stats = calculate_shipping_line_stats(
            make_shipping_line(credit_limit=100) for _ in range(3)
        )
        assert stats.total_lines == 3
        assert stats.total_credit_limit == 300

    def test_camel_case_records(self):
        """Plain dicts from the web client count the same as entity records."""
        lines = [
            {"isActive": True, "isPreferred": True, "serviceRating": 4, "creditLimit": 1000},
            {"isActive": True, "isPreferred": False, "creditLimit": 500},
            {"isActive": False, "isPreferred": True, "serviceRating": 5, "creditLimit": 9999},
        ]
        stats = calculate_shipping_line_stats(lines)

        assert stats.total_lines == 2
        assert stats.preferred_count == 1
        assert stats.average_rating == 4.0
        assert stats.total_credit_limit == 1500

    def test_mixed_records_and_dicts(self, make_shipping_line):
        lines = [
            make_shipping_line(service_rating=3, credit_limit=200),
            {"is_active": True, "service_rating": 5, "credit_limit": None},
            {"isPreferred": True, "creditLimit": 50},  # no isActive: not counted
        ]
        stats = calculate_shipping_line_stats(lines)
        assert stats.total_lines == 2
        assert stats.average_rating == 4.0
        assert stats.total_credit_limit == 200


@pytest.mark.unit
@pytest.mark.stats
class TestPortAgentStats:

    def test_mixed_agents(self, make_port_agent):
        agents = [
            make_port_agent(port_country="Indonesia", is_preferred=True, service_rating=4.0),
            make_port_agent(port_country="Indonesia", service_rating=3.0),
            make_port_agent(port_country="Singapore"),
            make_port_agent(port_country="Malaysia", is_active=False, is_preferred=True, service_rating=1),
        ]
        stats = calculate_port_agent_stats(agents)

        assert stats.total_agents == 3
        assert stats.preferred_count == 1
        assert stats.average_rating == 3.5
        assert stats.countries_count == 2

    def test_countries_are_case_sensitive(self, make_port_agent):
        agents = [
            make_port_agent(port_country="Indonesia"),
            make_port_agent(port_country="indonesia"),
            make_port_agent(port_country="Indonesia"),
        ]
        assert calculate_port_agent_stats(agents).countries_count == 2

    def test_empty(self):
        stats = calculate_port_agent_stats([])
        assert stats.total_agents == 0
        assert stats.preferred_count == 0
        assert stats.average_rating == 0
        assert stats.countries_count == 0

    def test_camel_case_records(self):
        agents = [
            {"isActive": True, "isPreferred": True, "serviceRating": 4.5, "portCountry": "Indonesia"},
            {"isActive": True, "portCountry": "Singapore"},
            {"isActive": True, "serviceRating": 3.5, "portCountry": "Indonesia"},
            {"isActive": False, "isPreferred": True, "portCountry": "Vietnam"},
        ]
        stats = calculate_port_agent_stats(agents)

        assert stats.total_agents == 3
        assert stats.preferred_count == 1
        assert stats.average_rating == 4.0
        assert stats.countries_count == 2


@pytest.mark.unit
@pytest.mark.stats
class TestAgentFeedbackSummary:

    def test_average_and_count(self):
        feedback = [
            AgentFeedback(agent_id="agent-001", rating=5),
            AgentFeedback(agent_id="agent-001", rating=4),
            AgentFeedback(agent_id="agent-001", rating=4),
        ]
        summary = summarize_agent_feedback(feedback)
        assert summary.average_rating == 4.33
        assert summary.rating_count == 3

    def test_no_feedback(self):
        summary = summarize_agent_feedback([])
        assert summary.average_rating == 0
        assert summary.rating_count == 0
