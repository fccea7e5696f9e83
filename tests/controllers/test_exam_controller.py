# -*- coding: utf-8 -*-
"""
Tests for ExamController.

Calls run on worker threads; each test waits for `operation_finished`.
"""

import pytest

from controllers.exam_controller import ExamController
from services.exceptions import ApiException, NetworkException, ValidationException


@pytest.fixture
def controller(qtbot, fake_api):
    ctrl = ExamController(fake_api)
    yield ctrl
    ctrl.wait_for_workers()


def finished(qtbot, controller, call, *args):
    """Run a controller call and return its OperationResult."""
    with qtbot.waitSignal(controller.operation_finished, timeout=5000) as blocker:
        call(*args)
    return blocker.args[1]


class TestLoadExams:

    def test_exams_come_back_ordered_by_name(self, qtbot, controller):
        result = finished(qtbot, controller, controller.load_exams)

        assert result.success
        assert [e.name for e in result.data] == ["GATE", "JEE"]
        assert [e.id for e in controller.exams] == ["e1", "e2"]

    def test_call_does_not_block(self, qtbot, controller):
        with qtbot.waitSignal(controller.exams_loaded, timeout=5000) as blocker:
            controller.load_exams()
            assert controller.exams == []

        assert len(blocker.args[0]) == 2

    def test_failure_leaves_empty_list(self, qtbot, controller, fake_api):
        finished(qtbot, controller, controller.load_exams)
        fake_api.fail_on.add("list_exams")

        result = finished(qtbot, controller, controller.load_exams)

        assert not result.success
        assert result.message == "Failed to fetch exams"
        assert isinstance(result.error, NetworkException)
        assert result.error.context == "exam.load"
        assert controller.exams == []

    def test_loading_toggles_around_a_call(self, qtbot, controller):
        states = []
        controller.loading_changed.connect(states.append)

        finished(qtbot, controller, controller.load_exams)

        assert states == [True, False]


class TestCreateExam:

    def test_blank_name_makes_no_remote_call(self, qtbot, controller, fake_api):
        with qtbot.waitSignal(controller.operation_finished) as blocker:
            started = controller.create_exam("   ", "whatever")

        result = blocker.args[1]
        assert not started
        assert not result.success
        assert result.message == "Exam name is required"
        assert isinstance(result.error, ValidationException)
        assert "create_exam" not in fake_api.calls

    def test_new_exam_is_appended_once_without_refetch(self, qtbot, controller, fake_api):
        finished(qtbot, controller, controller.load_exams)
        fake_api.calls.clear()

        result = finished(qtbot, controller, controller.create_exam, "  CAT ", "  Common Admission Test  ")

        assert result.success
        assert result.data.name == "CAT"
        assert result.data.description == "Common Admission Test"
        assert fake_api.calls == ["create_exam"]
        assert [e.name for e in controller.exams] == ["GATE", "JEE", "CAT"]
        assert controller.find_exam(result.data.id) is result.data

    def test_blank_description_is_stored_as_none(self, qtbot, controller, fake_api):
        result = finished(qtbot, controller, controller.create_exam, "CAT", "   ")

        assert result.data.description is None
        assert fake_api.exams[-1]["description"] is None

    def test_created_signal(self, qtbot, controller):
        with qtbot.waitSignal(controller.exam_created, timeout=5000) as blocker:
            controller.create_exam("CAT")

        assert blocker.args[0].name == "CAT"

    def test_remote_failure_keeps_list(self, qtbot, controller, fake_api):
        finished(qtbot, controller, controller.load_exams)
        fake_api.fail_on.add("create_exam")

        result = finished(qtbot, controller, controller.create_exam, "CAT")

        assert not result.success
        assert isinstance(result.error, ApiException)
        assert result.error.context == "exam.create"
        assert len(controller.exams) == 2
