"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import RejectionReason, ValidationResult, WordScoreEntry, SubmissionResult, RoundSnapshot

__all__ = ['RejectionReason', 'ValidationResult', 'WordScoreEntry', 'SubmissionResult', 'RoundSnapshot']
