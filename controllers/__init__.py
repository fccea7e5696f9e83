# -*- coding: utf-8 -*-
"""
Question Extractor Controllers
==============================
Controller layer between the wizard UI and the API client.

Controllers provide:
- Standardized error handling via OperationResult
- Qt signals for UI updates
- Client-side validation before remote calls

Usage:
    from controllers import ExamController

    controller = ExamController()
    result = controller.create_exam("JEE Main")
    if result.success:
        print(f"Created: {result.data.id}")
    else:
        print(f"Error: {result.message}")
"""

from controllers.base_controller import (
    BaseController,
    OperationResult,
)

from controllers.exam_controller import ExamController
from controllers.course_controller import CourseController

__all__ = [
    "BaseController",
    "OperationResult",
    "ExamController",
    "CourseController",
]
