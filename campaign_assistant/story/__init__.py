"""
Story tooling for the campaign assistant.

This module provides:
- Backstory generation from background, origin, motivation and flaw catalogs
- Narrative outlines built from story patterns, arcs, themes and tropes
- Plot hooks, arcs, encounters, twists and campaign outlines
- Relationship tracking with trust, conflicts and alliances
- Per-character story tracking with development and plot hook triggers
"""

from campaign_assistant.story.catalog import Catalog, CatalogItem
from campaign_assistant.story.backstory_generator import (
    Backstory,
    BackstoryGenerator,
    BackstoryGeneratorError,
    CatalogItemNotFoundError,
)
from campaign_assistant.story.narrative_engine import (
    CharacterProfile,
    NarrativeEngine,
    NarrativeError,
    PlotOutline,
)
from campaign_assistant.story.plot_generator import (
    CampaignOutline,
    PlotGenerator,
    PlotGeneratorError,
)
from campaign_assistant.story.relationship_manager import (
    Relationship,
    RelationshipManager,
    RelationshipManagerError,
    RelationshipNotFoundError,
    trust_description,
)
from campaign_assistant.story.story_tracker import (
    CharacterNotFoundError,
    PlotHookAlreadyActiveError,
    PlotHookNotFoundError,
    StoryTracker,
    StoryTrackerError,
)

__all__ = [
    "Catalog",
    "CatalogItem",
    "Backstory",
    "BackstoryGenerator",
    "BackstoryGeneratorError",
    "CatalogItemNotFoundError",
    "CharacterProfile",
    "NarrativeEngine",
    "NarrativeError",
    "PlotOutline",
    "CampaignOutline",
    "PlotGenerator",
    "PlotGeneratorError",
    "Relationship",
    "RelationshipManager",
    "RelationshipManagerError",
    "RelationshipNotFoundError",
    "trust_description",
    "CharacterNotFoundError",
    "PlotHookAlreadyActiveError",
    "PlotHookNotFoundError",
    "StoryTracker",
    "StoryTrackerError",
]
