"""
Quiz mode: question bank and answer scoring.
"""

from .bank import QUESTION_BANK, QuizQuestion, draw_questions
from .session import QuizResult, QuizSession

__all__ = ["QUESTION_BANK", "QuizQuestion", "draw_questions", "QuizSession", "QuizResult"]
