"""App subclasses — StudyApp."""

from flashdeck.l4_frameworks_and_drivers.apps.study import StudyApp

__all__ = ['StudyApp']
