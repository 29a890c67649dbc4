"""
Tests for Timer.
"""

import pytest

from pydecomp.core.compute.timing import Timer


class TestTimer:

    def test_result_has_total_and_sections(self):
        timer = Timer()
        timer.start()
        with timer.section('householder'):
            pass
        timer.stop()
        result = timer.result()
        assert result['total_seconds'] >= 0.0
        assert 'householder' in result

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        for _ in range(3):
            with timer.section('update'):
                pass
        timer.stop()
        assert list(timer.result()) == ['total_seconds', 'update']

    def test_section_recorded_on_exception(self):
        timer = Timer()
        timer.start()
        with pytest.raises(ZeroDivisionError):
            with timer.section('failing'):
                1 / 0
        timer.stop()
        assert 'failing' in timer.result()

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()
