"""
Pytest fixtures for the campaign assistant test suite.

Provides seeded and scripted dice, fresh table registries, resolvers and
engines, and the story subsystems wired to seeded dice.
"""

import pytest

from campaign_assistant.data_models import DiceRoller
from campaign_assistant.observability.run_log import RunLog
from campaign_assistant.story.backstory_generator import BackstoryGenerator
from campaign_assistant.story.narrative_engine import NarrativeEngine
from campaign_assistant.story.plot_generator import PlotGenerator
from campaign_assistant.story.relationship_manager import RelationshipManager
from campaign_assistant.story.story_tracker import StoryTracker
from campaign_assistant.tables.random_tables_engine import RandomTablesEngine
from campaign_assistant.tables.table_registry import TableRegistry, create_default_registry
from campaign_assistant.tables.table_resolver import TableResolver

from tests.helpers import ScriptedDice


# =============================================================================
# DICE FIXTURES
# =============================================================================


@pytest.fixture
def seeded_dice():
    """Provide a seeded DiceRoller for reproducible tests."""
    return DiceRoller(seed=42)


@pytest.fixture
def scripted_dice():
    """DiceRoller whose roll totals and uniform draws are queued by the test."""
    return ScriptedDice()


@pytest.fixture
def run_log():
    return RunLog(seed=42)


# =============================================================================
# TABLE FIXTURES
# =============================================================================


@pytest.fixture
def empty_registry():
    return TableRegistry()


@pytest.fixture
def registry():
    """Fresh registry holding every built-in table."""
    return create_default_registry()


@pytest.fixture
def resolver(registry, seeded_dice):
    return TableResolver(registry, seeded_dice)


@pytest.fixture
def scripted_resolver(registry, scripted_dice):
    return TableResolver(registry, scripted_dice)


@pytest.fixture
def engine(seeded_dice):
    return RandomTablesEngine(dice=seeded_dice)


@pytest.fixture
def scripted_engine(scripted_dice):
    return RandomTablesEngine(dice=scripted_dice)


# =============================================================================
# STORY FIXTURES
# =============================================================================


@pytest.fixture
def backstory_generator(seeded_dice):
    return BackstoryGenerator(seeded_dice)


@pytest.fixture
def narrative_engine(seeded_dice):
    return NarrativeEngine(seeded_dice)


@pytest.fixture
def plot_generator(seeded_dice):
    return PlotGenerator(seeded_dice)


@pytest.fixture
def relationship_manager(seeded_dice):
    return RelationshipManager(seeded_dice)


@pytest.fixture
def story_tracker():
    return StoryTracker()
