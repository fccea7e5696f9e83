# -*- coding: utf-8 -*-
"""English translations."""

EN_TRANSLATIONS = {
    # App
    "app.title": "Question Extractor",
    "app.subtitle": "Extract and categorize questions from PDF files",

    # Dialogs
    "dialog.error": "Error",
    "dialog.warning": "Warning",
    "dialog.success": "Success",

    # Buttons
    "button.cancel": "Cancel",
    "button.add_exam": "Add Exam",
    "button.adding": "Adding...",
    "button.new_exam": "Add New Exam",
    "button.add_course": "Add Course",
    "button.new_course": "Add New Course",
    "button.choose_files": "Choose PDF Files",
    "button.clear_files": "Clear",
    "button.extract": "Extract Questions",
    "button.extracting": "Extracting...",

    # Steps
    "step.exam": "Step 1: Select Exam",
    "step.course": "Step 2: Select Course",
    "step.slot_part": "Step 3: Configure Slot and Part",
    "step.question_types": "Step 4: Configure Question Types",
    "step.upload": "Step 5: Upload PDF Files",
    "step.extract": "Step 6: Extract Questions",

    # Placeholders and labels
    "placeholder.exam": "Select an exam...",
    "placeholder.course": "Select a course...",
    "placeholder.exam_name": "e.g., JEE Main, GATE, CAT",
    "placeholder.course_name": "e.g., Physics, Mathematics",
    "placeholder.description": "Brief description",
    "placeholder.slot": "e.g., Morning, Afternoon, Slot 1",
    "placeholder.part": "e.g., Part A, Part B, Section 1",
    "label.name": "Name *",
    "label.description": "Description",
    "label.slot": "Slot",
    "label.part": "Part",
    "label.year": "Year",
    "label.correct_marks": "Correct",
    "label.incorrect_marks": "Incorrect",
    "label.skipped_marks": "Skipped",
    "label.partial_marks": "Partial",
    "label.time_minutes": "Time (min)",
    "label.no_files": "No files selected",
    "label.files_selected": "{count} file(s) selected",
    "label.extract_summary": "{files} file(s) for {course}, {slot} / {part}, {year}",

    # Success
    "success.exam_added": "Exam added successfully",
    "success.course_added": "Course added successfully",
    "success.extraction": "Extracted {saved} question(s) from {files} file(s)",

    # Validation
    "validation.exam_name_required": "Exam name is required",
    "validation.course_name_required": "Course name is required",
    "validation.exam_required": "Select an exam first",
    "validation.course_required": "Select a course first",
    "validation.slot_required": "Slot is required",
    "validation.part_required": "Part is required",
    "validation.types_required": "Select at least one question type",
    "validation.type_incomplete": "{question_type}: every scoring and timing field is required",
    "validation.files_required": "Upload at least one PDF file",
    "validation.not_pdf": "{name} is not a PDF file",
    "validation.file_missing": "{name} does not exist",
    "validation.file_too_large": "{name} is larger than {limit} MB",

    # Errors
    "error.exam.load_failed": "Failed to fetch exams",
    "error.exam.create_failed": "Failed to add exam",
    "error.course.load_failed": "Failed to fetch courses",
    "error.course.create_failed": "Failed to add course",
    "error.extraction_failed": "Failed to extract questions",
    "error.api.connection": "Could not reach the server. Check your connection and try again.",
    "error.api.timeout": "The server took too long to respond.",
    "error.api.rejected": "The server rejected the request.",
    "error.unexpected": "An unexpected error occurred.",
}
