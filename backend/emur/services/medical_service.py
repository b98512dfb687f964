"""
Medical Service
Registry of medical professionals, bulk imported from the board CSV export.

CSV layout (Latin-1, ';' delimited, first row is a header):

    FirstName;<ignored>;LastName;<ignored>;CjppuNumber;ProfessionNumber

The import is all-or-nothing: a malformed file leaves the table untouched.
"""

import csv
import io
import logging
from typing import List

from emur.core.constants import MEDICAL_CSV_DELIMITER, MEDICAL_CSV_ENCODING
from emur.core.exceptions import BadRequestError
from emur.models.medical import Medical, MedicalRating
from emur.repositories.base import PersistenceError
from emur.repositories.health import MedicalRatingRepository, MedicalRepository, ReminderRepository
from emur.schemas.health_service import MedicalRatingCreate
from emur.services.base import BaseService

logger = logging.getLogger(__name__)

# Column positions in the CSV export
COL_FIRST_NAME = 0
COL_LAST_NAME = 2
COL_CJPPU_NUMBER = 4
COL_PROFESSION_NUMBER = 5


def parse_medical_csv(data: bytes) -> List[Medical]:
    """
    Parse the CSV export into unsaved Medical rows.

    Raises:
        BadRequestError: undecodable file or a row with too few columns
    """
    try:
        text = data.decode(MEDICAL_CSV_ENCODING)
        rows = list(csv.reader(io.StringIO(text), delimiter=MEDICAL_CSV_DELIMITER))
    except (UnicodeDecodeError, csv.Error) as e:
        raise BadRequestError(f"invalid csv file: {e}")

    medicals = []
    for line_number, row in enumerate(rows[1:], start=2):
        if not any(cell.strip() for cell in row):
            continue
        if len(row) <= COL_PROFESSION_NUMBER:
            raise BadRequestError(f"invalid csv file: line {line_number} has {len(row)} columns")
        medicals.append(Medical(
            first_name=row[COL_FIRST_NAME].strip(),
            last_name=row[COL_LAST_NAME].strip(),
            cjppu_number=row[COL_CJPPU_NUMBER].strip(),
            profession_number=row[COL_PROFESSION_NUMBER].strip(),
        ))
    return medicals


class MedicalService(BaseService):
    def __init__(self, db):
        super().__init__(db)
        self.medicals = MedicalRepository(db)
        self.ratings = MedicalRatingRepository(db)
        self.reminders = ReminderRepository(db)

    def list_medicals(self) -> List[Medical]:
        return self.medicals.find(order_by=Medical.last_name)

    def import_csv(self, data: bytes) -> int:
        """Insert every row of the file in a single transaction; returns the row count."""
        medicals = parse_medical_csv(data)
        try:
            for medical in medicals:
                self.medicals.create_with_omit(medical, "uuid")
            self.commit()
        except PersistenceError as e:
            raise self.persistence_failure("importing medicals", e)
        logger.info(f"[Medical] Imported {len(medicals)} medical(s)")
        return len(medicals)

    def rate(self, data: MedicalRatingCreate) -> MedicalRating:
        """
        Rate a medical for the appointment of a reminder.

        Raises:
            BadRequestError: zero ids
            NotFoundError: unknown medical or reminder
        """
        if not data.medical_id or not data.reminder_id:
            raise BadRequestError("medical_id and reminder_id are required")
        medical = self.get_by_id_or_404(self.medicals, data.medical_id, "medical")
        reminder = self.get_by_id_or_404(self.reminders, data.reminder_id, "reminder")
        rating = MedicalRating(medical_id=medical.id, reminder_id=reminder.id, rating=data.rating)
        try:
            self.ratings.create(rating)
            self.commit()
        except PersistenceError as e:
            raise self.persistence_failure("rating medical", e)
        return rating
