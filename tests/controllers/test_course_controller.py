# -*- coding: utf-8 -*-
"""
Tests for CourseController.
"""

import pytest

from controllers.course_controller import CourseController
from services.exceptions import NetworkException, ValidationException


@pytest.fixture
def controller(qtbot, fake_api):
    ctrl = CourseController(fake_api)
    yield ctrl
    ctrl.wait_for_workers()


def finished(qtbot, controller, call, *args):
    with qtbot.waitSignal(controller.operation_finished, timeout=5000) as blocker:
        call(*args)
    return blocker.args[1]


class TestLoadCourses:

    def test_only_courses_of_the_exam(self, qtbot, controller):
        result = finished(qtbot, controller, controller.load_courses, "e2")

        assert result.success
        assert [c.name for c in controller.courses] == ["Chemistry", "Physics"]
        assert controller.exam_id == "e2"

    def test_exam_is_current_before_the_list_arrives(self, qtbot, controller):
        with qtbot.waitSignal(controller.operation_finished, timeout=5000):
            controller.load_courses("e2")
            assert controller.exam_id == "e2"
            assert controller.courses == []

    def test_list_for_a_previous_exam_is_dropped(self, qtbot, controller):
        controller.load_courses("e2")
        controller.load_courses("e1")
        controller.wait_for_workers()
        qtbot.wait(50)

        assert [c.id for c in controller.courses] == ["c3"]

    def test_failure_leaves_empty_list(self, qtbot, controller, fake_api):
        fake_api.fail_on.add("list_courses")

        result = finished(qtbot, controller, controller.load_courses, "e2")

        assert not result.success
        assert isinstance(result.error, NetworkException)
        assert result.error.context == "course.load"
        assert controller.courses == []

    def test_clear_forgets_exam(self, qtbot, controller):
        finished(qtbot, controller, controller.load_courses, "e2")

        with qtbot.waitSignal(controller.courses_loaded) as blocker:
            controller.clear()

        assert blocker.args[0] == []
        assert controller.exam_id is None
        assert controller.courses == []


class TestCreateCourse:

    def test_requires_exam(self, qtbot, controller, fake_api):
        with qtbot.waitSignal(controller.operation_finished) as blocker:
            assert not controller.create_course("Maths")

        result = blocker.args[1]
        assert isinstance(result.error, ValidationException)
        assert result.error.field == "exam_id"
        assert "create_course" not in fake_api.calls

    def test_blank_name_makes_no_remote_call(self, qtbot, controller, fake_api):
        finished(qtbot, controller, controller.load_courses, "e2")

        result = finished(qtbot, controller, controller.create_course, "  ")

        assert not result.success
        assert result.error.field == "name"
        assert "create_course" not in fake_api.calls

    def test_new_course_belongs_to_current_exam(self, qtbot, controller, fake_api):
        finished(qtbot, controller, controller.load_courses, "e1")

        result = finished(qtbot, controller, controller.create_course, "Algorithms", "")

        assert result.success
        assert result.data.exam_id == "e1"
        assert result.data.description is None
        assert [c.name for c in controller.courses] == ["Computer Science", "Algorithms"]
        assert fake_api.calls.count("list_courses") == 1
