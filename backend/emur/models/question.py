"""
Question and Answer Models
Community questions and their answers.
"""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, Text

from emur.models.base import PublicModel


class Question(PublicModel):
    __tablename__ = "questions"

    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    text = Column(Text, nullable=False)


class Answer(PublicModel):
    """An answer always references its parent question."""
    __tablename__ = "answers"

    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    question_id = Column(Integer, ForeignKey("questions.id", ondelete="CASCADE"), nullable=False, index=True)
    text = Column(Text, nullable=False)
    is_public = Column(Boolean, default=True, nullable=False)
