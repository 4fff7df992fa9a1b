"""
Tests for relationship tracking: trust, conflicts, alliances and progression.
"""

import pytest

from campaign_assistant.story.relationship_manager import (
    AllianceNotFoundError,
    ConflictNotFoundError,
    DuplicateRelationshipError,
    RelationshipManager,
    RelationshipManagerError,
    RelationshipNotFoundError,
    trust_description,
)

from tests.helpers import ScriptedDice


@pytest.fixture
def companions(relationship_manager):
    return relationship_manager.create_relationship("aria", "brom", "loyal_companion")


class TestCreation:
    def test_create_relationship(self, relationship_manager, companions):
        assert companions.relationship_id == "aria_brom"
        assert companions.characters == ("aria", "brom")
        assert companions.trust_level == 0
        assert companions.status == "neutral"
        assert relationship_manager.get_relationship("aria_brom") is companions

    def test_initial_status(self, relationship_manager):
        rel = relationship_manager.create_relationship("kael", "vex", "rival_competitor", initial_status="tense")
        assert rel.status == "tense"

    def test_duplicate_raises(self, relationship_manager, companions):
        with pytest.raises(DuplicateRelationshipError, match="Relationship aria_brom already exists"):
            relationship_manager.create_relationship("aria", "brom", "mentor_student")

    def test_reverse_pair_is_separate(self, relationship_manager, companions):
        reverse = relationship_manager.create_relationship("brom", "aria", "loyal_companion")
        assert reverse.relationship_id == "brom_aria"

    def test_unknown_relationship_raises(self, relationship_manager):
        with pytest.raises(RelationshipNotFoundError, match="Relationship nobody_here not found"):
            relationship_manager.get_relationship("nobody_here")

    def test_status_change_recorded(self, relationship_manager, companions):
        relationship_manager.update_relationship_status("aria_brom", "friendly", "Shared a campfire")
        event = companions.history[-1]
        assert companions.status == "friendly"
        assert event.event_type == "status_change"
        assert event.details == {"old_status": "neutral", "new_status": "friendly"}


class TestTrust:
    """Trust moves by fixed amounts and stays in [-100, 100]."""

    def test_major_conflict_then_forgiveness(self, relationship_manager, companions):
        conflict = relationship_manager.create_conflict("aria_brom", "personal_betrayal", "Lied about the map", "major")
        assert companions.trust_level == -25
        relationship_manager.resolve_conflict("aria_brom", conflict.conflict_id, "forgiveness")
        assert companions.trust_level == -5
        assert conflict.status == "resolved"
        assert conflict.resolution_method == "forgiveness"
        assert conflict.resolved_at is not None

    @pytest.mark.parametrize("severity, expected", [("minor", -10), ("major", -25), ("severe", -50)])
    def test_conflict_severity(self, relationship_manager, companions, severity, expected):
        relationship_manager.create_conflict("aria_brom", "debt_obligation", "Unpaid loan", severity)
        assert companions.trust_level == expected

    def test_other_resolution_restores_ten(self, relationship_manager, companions):
        conflict = relationship_manager.create_conflict("aria_brom", "debt_obligation", "Unpaid loan")
        relationship_manager.resolve_conflict("aria_brom", conflict.conflict_id, "repayment")
        assert companions.trust_level == 0

    def test_escalation(self, relationship_manager, companions):
        conflict = relationship_manager.create_conflict("aria_brom", "cultural_clash", "Insulted a custom")
        relationship_manager.resolve_conflict("aria_brom", conflict.conflict_id, "argument", outcome="escalated")
        assert companions.trust_level == -40
        assert conflict.status == "escalated"

    def test_other_outcome_leaves_trust(self, relationship_manager, companions):
        conflict = relationship_manager.create_conflict("aria_brom", "cultural_clash", "Insulted a custom")
        relationship_manager.resolve_conflict("aria_brom", conflict.conflict_id, "silence", outcome="ignored")
        assert companions.trust_level == -10

    def test_trust_clamped_low(self, relationship_manager, companions):
        for _ in range(5):
            relationship_manager.create_conflict("aria_brom", "personal_betrayal", "Again", "catastrophic")
        assert companions.trust_level == -100

    def test_trust_clamped_high(self, relationship_manager, companions):
        relationship_manager.add_relationship_event("aria_brom", "rescue", "Saved from a dragon", 500)
        assert companions.trust_level == 100

    def test_event_recorded(self, relationship_manager, companions):
        event = relationship_manager.add_relationship_event("aria_brom", "gift", "A fine dagger", 7)
        assert companions.history == [event]
        assert companions.trust_level == 7
        assert event.to_dict()["impact"] == 7

    def test_unknown_conflict_type(self, relationship_manager, companions):
        with pytest.raises(RelationshipManagerError, match="Unknown conflict type: food_fight"):
            relationship_manager.create_conflict("aria_brom", "food_fight", "Pie")
        assert companions.conflicts == []

    def test_unknown_conflict_id(self, relationship_manager, companions):
        with pytest.raises(ConflictNotFoundError):
            relationship_manager.resolve_conflict("aria_brom", "conflict_missing", "forgiveness")

    def test_conflict_copies_catalog_details(self, relationship_manager, companions):
        conflict = relationship_manager.create_conflict("aria_brom", "personal_betrayal", "Sold us out")
        catalog = relationship_manager.conflict_types.require("personal_betrayal")
        assert conflict.resolution_methods == list(catalog.resolution_methods)
        assert conflict.escalation_risk == catalog.escalation_risk
        assert conflict.conflict_id.startswith("conflict_")


class TestTrustDescription:
    @pytest.mark.parametrize(
        "trust, description",
        [
            (100, "Unwavering Trust"),
            (80, "Unwavering Trust"),
            (79, "Strong Trust"),
            (40, "Moderate Trust"),
            (20, "Limited Trust"),
            (0, "Neutral"),
            (-1, "Distrust"),
            (-20, "Distrust"),
            (-40, "Strong Distrust"),
            (-60, "Deep Distrust"),
            (-80, "Hatred"),
            (-81, "Utter Loathing"),
            (-100, "Utter Loathing"),
        ],
    )
    def test_ladder(self, trust, description):
        assert trust_description(trust) == description


class TestAlliances:
    def test_form_and_dissolve(self, relationship_manager, companions):
        alliance = relationship_manager.form_alliance("aria_brom", "trade_agreement", {"share": "half"})
        assert companions.trust_level == 15
        assert alliance.is_active
        assert alliance.terms == {"share": "half"}
        catalog = relationship_manager.alliance_types.require("trade_agreement")
        assert alliance.benefits == list(catalog.benefits)
        assert alliance.risks == list(catalog.risks)

        relationship_manager.dissolve_alliance("aria_brom", alliance.alliance_id, "Prices rose")
        assert companions.trust_level == -5
        assert alliance.status == "dissolved"
        assert alliance.dissolution_reason == "Prices rose"

    def test_unknown_alliance_type(self, relationship_manager, companions):
        with pytest.raises(RelationshipManagerError, match="Unknown alliance type: pirate_code"):
            relationship_manager.form_alliance("aria_brom", "pirate_code")

    def test_dissolve_unknown_alliance(self, relationship_manager, companions):
        with pytest.raises(AllianceNotFoundError):
            relationship_manager.dissolve_alliance("aria_brom", "alliance_missing")


class TestQueries:
    def test_status_summary(self, relationship_manager, companions):
        relationship_manager.create_conflict("aria_brom", "debt_obligation", "Unpaid loan")
        relationship_manager.form_alliance("aria_brom", "blood_oath")
        status = relationship_manager.get_relationship_status("aria_brom")
        assert status["trust_level"] == 5
        assert status["trust_description"] == "Neutral"
        assert status["active_conflicts"] == 1
        assert status["active_alliances"] == 1
        assert status["characters"] == ["aria", "brom"]

    def test_status_of_unknown_is_none(self, relationship_manager):
        assert relationship_manager.get_relationship_status("ghost_ghoul") is None

    def test_character_relationships(self, relationship_manager, companions):
        relationship_manager.create_relationship("brom", "kael", "rival_competitor")
        relationship_manager.create_relationship("kael", "vex", "family_bond")
        results = relationship_manager.get_character_relationships("brom")
        assert {r["id"] for r in results} == {"aria_brom", "brom_kael"}
        others = {r["id"]: r["other_character"] for r in results}
        assert others == {"aria_brom": "aria", "brom_kael": "kael"}


class TestGeneration:
    def test_social_encounter_creates_relationship(self, relationship_manager):
        encounter = relationship_manager.generate_social_encounter("aria", "vex", context="tavern")
        relationship = relationship_manager.get_relationship("aria_vex")
        assert relationship.relationship_type in relationship_manager.relationship_types.ids()
        assert encounter.relationship_id == "aria_vex"
        assert encounter.context == "tavern"
        assert encounter.description
        assert len(encounter.possible_outcomes) == 3

    def test_social_encounter_keeps_existing(self, relationship_manager, companions):
        relationship_manager.generate_social_encounter("aria", "brom")
        assert relationship_manager.get_relationship("aria_brom") is companions
        assert len(relationship_manager.relationships) == 1

    def test_positive_progression(self):
        manager = RelationshipManager(ScriptedDice(draws=[0.1]))
        rel = manager.create_relationship("aria", "brom", "loyal_companion")
        events = manager.simulate_relationship_progression("aria_brom", days=30)
        assert len(events) == 1
        assert events[0]["type"] == "positive_progression"
        assert events[0]["description"].split()[-1] in {"loyalty", "support", "trust"}
        assert rel.trust_level == 5

    def test_maintenance_progression(self):
        manager = RelationshipManager(ScriptedDice(draws=[0.45]))
        rel = manager.create_relationship("aria", "brom", "loyal_companion")
        events = manager.simulate_relationship_progression("aria_brom", days=10)
        assert [e["type"] for e in events] == ["maintenance"]
        assert rel.trust_level == 0

    def test_conflict_progression(self):
        manager = RelationshipManager(ScriptedDice(draws=[0.7, 0.1]))
        rel = manager.create_relationship("aria", "brom", "loyal_companion")
        events = manager.simulate_relationship_progression("aria_brom", days=30)
        assert events[0]["type"] == "conflict_created"
        assert events[0]["conflict"]["severity"] == "minor"
        assert rel.trust_level == -10
        assert len(rel.conflicts) == 1

    def test_quiet_progression(self):
        manager = RelationshipManager(ScriptedDice(draws=[0.7, 0.9]))
        manager.create_relationship("aria", "brom", "loyal_companion")
        assert manager.simulate_relationship_progression("aria_brom") == []

    def test_steps_follow_days(self):
        manager = RelationshipManager(ScriptedDice(draws=[0.45, 0.45, 0.45]))
        manager.create_relationship("aria", "brom", "loyal_companion")
        assert len(manager.simulate_relationship_progression("aria_brom", days=95)) == 3

    def test_uncatalogued_type_does_not_progress(self, relationship_manager):
        relationship_manager.create_relationship("aria", "brom", "drinking_buddies")
        assert relationship_manager.simulate_relationship_progression("aria_brom", days=300) == []


class TestCatalogsAndPersistence:
    def test_catalog_sizes(self, relationship_manager):
        assert len(relationship_manager.get_all_relationship_types()) == 12
        assert len(relationship_manager.get_all_social_dynamics()) == 8
        assert len(relationship_manager.get_all_conflict_types()) == 10
        assert len(relationship_manager.get_all_alliance_types()) == 8

    def test_export_import(self, relationship_manager, companions):
        conflict = relationship_manager.create_conflict("aria_brom", "personal_betrayal", "Lied", "major")
        relationship_manager.resolve_conflict("aria_brom", conflict.conflict_id, "forgiveness")
        relationship_manager.form_alliance("aria_brom", "mutual_defense_pact")
        data = relationship_manager.export_relationship_data()
        assert data["version"] == "1.0"
        assert set(data) == {
            "relationships", "relationshipTypes", "socialDynamics",
            "conflictTypes", "alliances", "exportedAt", "version",
        }

        restored = RelationshipManager()
        assert restored.import_relationship_data(data) == 1
        rel = restored.get_relationship("aria_brom")
        assert rel.trust_level == companions.trust_level
        assert rel.conflicts[0].status == "resolved"
        assert rel.alliances[0].alliance_type == "mutual_defense_pact"
        assert rel.to_dict() == companions.to_dict()

    def test_import_clamps_trust(self, relationship_manager, companions):
        data = relationship_manager.export_relationship_data()
        data["relationships"]["aria_brom"]["trust_level"] = 250
        restored = RelationshipManager()
        restored.import_relationship_data(data)
        assert restored.get_relationship("aria_brom").trust_level == 100

    def test_invalid_import_raises(self, relationship_manager, companions):
        with pytest.raises(RelationshipManagerError, match="Invalid relationship data"):
            relationship_manager.import_relationship_data({"relationships": {"x": {"characters": ["a", "b"]}}})
        assert relationship_manager.get_relationship("aria_brom") is companions
