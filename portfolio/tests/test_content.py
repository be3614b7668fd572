"""Tests for site content models and loading."""

import json
import pytest
from pydantic import ValidationError

from portfolio.common.content import DEFAULT_CONTENT, load_content
from portfolio.common.schemas import KnowledgeContext, PersonalInfo


class TestDefaultContent:
    def test_loads_builtin_content(self, content):
        assert content.knowledge.name == "Alemu Sisay Nigru"
        assert len(content.knowledge.education) == 2
        assert len(content.blog_posts) == 3

    def test_sections_are_tuples(self, knowledge):
        assert isinstance(knowledge.skills, tuple)
        assert isinstance(knowledge.projects[0].technologies, tuple)

    def test_knowledge_is_frozen(self, knowledge):
        with pytest.raises(ValidationError):
            knowledge.personal = PersonalInfo(name="Someone Else")

    def test_snapshot_is_plain_data(self, knowledge):
        snapshot = knowledge.snapshot()
        assert snapshot["personal"]["email"] == "alemu.nigru@unibs.it"
        assert snapshot["skills"][0] == "Machine Learning"
        assert snapshot["projects"][0]["technologies"] == ["Python", "TensorFlow", "Scikit-learn"]
        json.dumps(snapshot)

    def test_dashboard(self, content):
        assert content.dashboard() == {
            "totalPublications": 1,
            "totalProjects": 1,
            "yearsOfExperience": 5,
            "blogPosts": 3,
            "skills": 10,
            "researchAreas": ["AI", "ML", "Healthcare", "Education"],
        }

    def test_get_post(self, content):
        assert content.get_post(2).title == "Machine Learning Applications in Healthcare"
        assert content.get_post(99) is None


class TestLoadContent:
    def test_none_returns_default(self):
        assert load_content(None).knowledge.name == "Alemu Sisay Nigru"

    def test_load_from_file(self, tmp_path):
        data = {
            "knowledge": {
                "personal": {"name": "Grace Hopper", "email": "grace@example.org"},
                "skills": ["COBOL", "Compilers"],
            },
            "blog_posts": [{"id": 7, "title": "Bugs", "tags": ["history"]}],
            "years_of_experience": 40,
        }
        path = tmp_path / "content.json"
        path.write_text(json.dumps(data))

        content = load_content(str(path))

        assert content.knowledge.email == "grace@example.org"
        assert content.knowledge.education == ()
        assert content.get_post(7).tags == ("history",)
        assert content.dashboard()["yearsOfExperience"] == 40

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_content(tmp_path / "nope.json")

    def test_invalid_json_raises_value_error(self, tmp_path):
        path = tmp_path / "content.json"
        path.write_text("{broken")
        with pytest.raises(ValueError, match="Invalid content file"):
            load_content(path)

    def test_missing_required_field_raises_value_error(self, tmp_path):
        path = tmp_path / "content.json"
        path.write_text(json.dumps({"knowledge": {"personal": {}}}))
        with pytest.raises(ValueError, match="Invalid content file"):
            load_content(path)

    def test_default_dict_round_trips(self):
        knowledge = KnowledgeContext.model_validate(DEFAULT_CONTENT["knowledge"])
        assert knowledge.personal.github == "github.com/alexsisay"
