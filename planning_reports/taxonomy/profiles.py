"""
Categorical labels produced upstream by the projection engine.

These values are consumed as opaque labels: how the engine decides that a
corpus is "skewed" or that a SIP is "too low" is not re-derived here.

Usage example::

    from planning_reports.taxonomy.profiles import CorpusProfile, GoalStatus

    if profile == CorpusProfile.SKEWED and status == GoalStatus.CAN_BE_MET:
        ...
"""

from enum import StrEnum


class GoalStatus(StrEnum):
    """Feasibility verdict for one goal tier under one planning method."""

    CAN_BE_MET = "can_be_met"
    """Confidence >= 90% and the lower-bound corpus reaches the target."""

    AT_RISK = "at_risk"
    """Goal may be met, but with less than 90% confidence."""

    CANNOT_BE_MET = "cannot_be_met"
    """Goal is not expected to be met."""


class GoalTier(StrEnum):
    """Funding target tier of a goal."""

    BASIC = "basic"
    """Minimum funding target."""

    AMBITIOUS = "ambitious"
    """Stretch target above the basic tier."""


class CorpusProfile(StrEnum):
    """How the starting corpus is spread across goal buckets."""

    BALANCED = "balanced_corpus"
    SKEWED = "skewed_corpus"
    NO_CORPUS = "no_corpus"


class SipProfile(StrEnum):
    """How the monthly SIP compares with what the goals require."""

    RIGHT_AMOUNT = "sip_right_amount"
    STRETCH = "sip_stretch"
    TOO_LOW = "sip_too_low"
