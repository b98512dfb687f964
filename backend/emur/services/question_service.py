"""
Question Service
Community questions and their answers.
"""

from typing import List, Tuple
from uuid import UUID

from emur.models.question import Answer, Question
from emur.repositories.base import PersistenceError
from emur.repositories.content import AnswerRepository, QuestionRepository
from emur.schemas.question import AnswerCreate, QuestionCreate
from emur.services.base import BaseService


class QuestionService(BaseService):
    def __init__(self, db):
        super().__init__(db)
        self.questions = QuestionRepository(db)
        self.answers = AnswerRepository(db)

    def list_questions(self) -> List[Question]:
        return self.questions.find(order_by=Question.created_at.desc())

    def get_with_answers(self, question_uuid: UUID) -> Tuple[Question, List[Answer]]:
        question = self.get_or_404(self.questions, question_uuid, "question")
        return question, self.answers.list_for_question(question.id)

    def create_question(self, claims, data: QuestionCreate) -> Question:
        user = self.requester(claims)
        question = Question(user_id=user.id, text=data.text)
        try:
            self.questions.create_with_omit(question, "uuid")
            self.commit()
        except PersistenceError as e:
            raise self.persistence_failure("creating question", e)
        return question

    def create_answer(self, claims, data: AnswerCreate) -> Answer:
        user = self.requester(claims)
        question = self.get_or_404(self.questions, data.question_uuid, "question")
        answer = Answer(user_id=user.id, question_id=question.id, text=data.text, is_public=True)
        try:
            self.answers.create_with_omit(answer, "uuid")
            self.commit()
        except PersistenceError as e:
            raise self.persistence_failure("creating answer", e)
        return answer
