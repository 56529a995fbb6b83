"""Domain entities."""

from .region import CandidateRegion

__all__ = ['CandidateRegion']
