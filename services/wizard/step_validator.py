# -*- coding: utf-8 -*-
"""
Step gating for the Question Extractor wizard.

Works on the context data only, without UI coupling. Visibility and
completeness are always recomputed from the current state; nothing here is
cached.
"""

from typing import List, Tuple

from services.translation_manager import tr


def _is_blank(value) -> bool:
    return value is None or str(value).strip() == ""


class StepValidator:
    """Decides which wizard steps are visible and whether configuration is complete."""

    # Step constants, in reveal order
    STEP_EXAM = 0
    STEP_COURSE = 1
    STEP_SLOT_PART = 2
    STEP_QUESTION_TYPES = 3
    STEP_UPLOAD = 4
    STEP_EXTRACT = 5

    ALL_STEPS = (
        STEP_EXAM,
        STEP_COURSE,
        STEP_SLOT_PART,
        STEP_QUESTION_TYPES,
        STEP_UPLOAD,
        STEP_EXTRACT,
    )

    @staticmethod
    def settings_complete(question_type_settings) -> bool:
        """At least one type configured and every configured type fully defined."""
        if not question_type_settings:
            return False
        return all(config.is_fully_defined() for config in question_type_settings.values())

    @staticmethod
    def is_config_complete(context) -> bool:
        """
        The completion flag.

        True iff exam and course are selected, slot and part are non-blank
        after trimming, and the question type settings are complete.
        """
        return (
            context.exam is not None
            and context.course is not None
            and not _is_blank(context.slot)
            and not _is_blank(context.part)
            and StepValidator.settings_complete(context.question_type_settings)
        )

    @staticmethod
    def is_step_visible(step_index: int, context) -> bool:
        """Whether a step is revealed for the current state."""
        if step_index == StepValidator.STEP_EXAM:
            return True

        elif step_index == StepValidator.STEP_COURSE:
            return context.exam is not None

        elif step_index == StepValidator.STEP_SLOT_PART:
            return context.course is not None

        elif step_index == StepValidator.STEP_QUESTION_TYPES:
            return (
                context.course is not None
                and not _is_blank(context.slot)
                and not _is_blank(context.part)
            )

        elif step_index == StepValidator.STEP_UPLOAD:
            return StepValidator.is_config_complete(context)

        elif step_index == StepValidator.STEP_EXTRACT:
            return StepValidator.is_config_complete(context) and len(context.uploaded_files) > 0

        return False

    @staticmethod
    def visible_steps(context) -> List[int]:
        """Indexes of all currently visible steps."""
        return [s for s in StepValidator.ALL_STEPS if StepValidator.is_step_visible(s, context)]

    @staticmethod
    def validate_step(step_index: int, context) -> Tuple[bool, str]:
        """
        Explain what the given step still needs.

        Args:
            step_index: Step to check
            context: ExtractorContext object

        Returns:
            Tuple of (is_valid, error_message)
        """
        if step_index == StepValidator.STEP_EXAM:
            if context.exam is None:
                return False, tr("validation.exam_required")
            return True, ""

        elif step_index == StepValidator.STEP_COURSE:
            if context.course is None:
                return False, tr("validation.course_required")
            return True, ""

        elif step_index == StepValidator.STEP_SLOT_PART:
            if _is_blank(context.slot):
                return False, tr("validation.slot_required")
            if _is_blank(context.part):
                return False, tr("validation.part_required")
            return True, ""

        elif step_index == StepValidator.STEP_QUESTION_TYPES:
            if not context.question_type_settings:
                return False, tr("validation.types_required")
            for question_type, config in context.question_type_settings.items():
                if not config.is_fully_defined():
                    return False, tr("validation.type_incomplete", question_type=question_type)
            return True, ""

        elif step_index == StepValidator.STEP_UPLOAD:
            if not context.uploaded_files:
                return False, tr("validation.files_required")
            return True, ""

        elif step_index == StepValidator.STEP_EXTRACT:
            errors = []
            for index in StepValidator.ALL_STEPS[:-1]:
                is_valid, message = StepValidator.validate_step(index, context)
                if not is_valid:
                    errors.append(message)
            if errors:
                return False, " | ".join(errors)
            return True, ""

        # Unknown step
        return True, ""

    @staticmethod
    def get_step_name(step_index: int) -> str:
        """Title shown above each step."""
        keys = [
            "step.exam",
            "step.course",
            "step.slot_part",
            "step.question_types",
            "step.upload",
            "step.extract",
        ]
        if 0 <= step_index < len(keys):
            return tr(keys[step_index])
        return ""
