# -*- coding: utf-8 -*-
"""
Question Extractor Steps Package.

- Step 1: Exam selection
- Step 2: Course selection
- Step 3: Slot, part and year
- Step 4: Question type configuration
- Step 5: PDF upload
- Step 6: Extraction
"""

from .exam_selection_step import ExamSelectionStep
from .course_selection_step import CourseSelectionStep
from .slot_part_step import SlotPartStep
from .question_type_step import QuestionTypeStep
from .upload_step import UploadStep
from .extract_step import ExtractStep, ExtractionWorker

__all__ = [
    'ExamSelectionStep',
    'CourseSelectionStep',
    'SlotPartStep',
    'QuestionTypeStep',
    'UploadStep',
    'ExtractStep',
    'ExtractionWorker',
]
