"""
Tests for the keyword fallback responder.

Rule order is a contract: the first matching rule wins.
"""

import pytest

from portfolio.assistant.fallback import FallbackResponder, FallbackRule, FALLBACK_RULES
from portfolio.common.schemas import KnowledgeContext, PersonalInfo


@pytest.fixture
def responder():
    return FallbackResponder()


class TestRuleOrder:
    def test_rule_sequence(self):
        assert [r.name for r in FALLBACK_RULES] == [
            "research", "education", "skills", "contact", "publications", "projects",
        ]

    def test_research_wins_over_skills_and_projects(self, responder, knowledge):
        question = "What are your research skills and projects?"
        assert responder.match_rule(question).name == "research"
        answer = responder.match(question, knowledge)
        assert answer == FALLBACK_RULES[0].render(knowledge)

    def test_skills_wins_over_projects(self, responder):
        assert responder.match_rule("Which skills did the project need?").name == "skills"

    def test_education_wins_over_contact(self, responder):
        assert responder.match_rule("Email me about your degree").name == "education"

    @pytest.mark.parametrize("question,rule", [
        ("What is your FOCUS?", "research"),
        ("Tell me about your education", "education"),
        ("Any expertise in vision?", "skills"),
        ("What's your email?", "contact"),
        ("Have you written a paper?", "publications"),
        ("List your publications", "publications"),
        ("Show me a project", "projects"),
    ])
    def test_keywords_case_insensitive(self, responder, question, rule):
        assert responder.match_rule(question).name == rule

    def test_no_match(self, responder):
        assert responder.match_rule("xyz unrelated gibberish") is None

    def test_match_rule_returns_rule_object(self, responder):
        rule = responder.match_rule("email?")
        assert isinstance(rule, FallbackRule)
        assert rule is FALLBACK_RULES[3]


class TestAnswers:
    def test_contact_contains_email(self, responder, knowledge):
        answer = responder.match("How can I contact you?", knowledge)
        assert "alemu.nigru@unibs.it" in answer
        assert "linkedin.com/in/alemu-sisay" in answer

    def test_generic_answer_contains_email(self, responder, knowledge):
        answer = responder.match("xyz unrelated gibberish", knowledge)
        assert "alemu.nigru@unibs.it" in answer
        assert "research focus" in answer

    def test_education_lists_institutions(self, responder, knowledge):
        answer = responder.match("What degree do you have?", knowledge)
        assert "University of Brescia" in answer
        assert "PhD, Artificial Intelligence in Medicine" in answer
        assert "MSc, Communication Technologies and Multimedia" in answer

    def test_research_uses_current_focus(self, responder, knowledge):
        answer = responder.match("What is your research about?", knowledge)
        assert "Medical Imaging" in answer

    def test_skills_listed(self, responder, knowledge):
        answer = responder.match("What skills do you have?", knowledge)
        assert "PyTorch" in answer
        assert "and Academic Writing" in answer

    def test_publications_listed(self, responder, knowledge):
        answer = responder.match("Any publications?", knowledge)
        assert "Advanced AI Applications in Healthcare" in answer
        assert "AI Research Journal" in answer

    def test_projects_listed(self, responder, knowledge):
        answer = responder.match("Tell me about a project", knowledge)
        assert "AI-Powered Healthcare System" in answer
        assert "Scikit-learn" in answer

    def test_answers_follow_context(self, responder):
        ctx = KnowledgeContext(personal=PersonalInfo(name="Ada Lovelace", email="ada@example.org"))
        assert "ada@example.org" in responder.match("contact?", ctx)
        assert "Ada Lovelace" in responder.match("zzz", ctx)


class TestTotality:
    @pytest.mark.parametrize("question", [
        "", "   ", "research", "degree", "skill", "email", "paper", "project", "?!", "🙂",
    ])
    def test_non_empty_for_empty_context(self, responder, question):
        ctx = KnowledgeContext(personal=PersonalInfo(name="Nobody"))
        assert responder.match(question, ctx).strip()

    def test_deterministic(self, responder, knowledge):
        for question in ("research?", "How can I contact you?", "xyz unrelated gibberish"):
            assert responder.match(question, knowledge) == responder.match(question, knowledge)

    def test_custom_rules(self, knowledge):
        responder = FallbackResponder(rules=(FallbackRule("hello", ("hi",), lambda ctx: "hello!"),))
        assert responder.match("hi there", knowledge) == "hello!"
        assert "alemu.nigru@unibs.it" in responder.match("bye", knowledge)
