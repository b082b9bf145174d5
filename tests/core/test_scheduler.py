"""
Tests for the job registry and manual triggering.
"""

from unittest.mock import AsyncMock, patch

import pytest
from apscheduler.triggers.interval import IntervalTrigger

from docuprint.core import scheduler


@pytest.fixture(autouse=True)
def empty_registry():
    with patch.dict(scheduler._job_registry, clear=True):
        yield


class TestJobRegistry:
    def test_registered_job_is_listed(self):
        scheduler.register_job("test_job", AsyncMock(), IntervalTrigger(hours=1))

        jobs = scheduler.list_registered_jobs()

        assert jobs == [{"job_id": "test_job", "next_run_time": None}]

    @pytest.mark.asyncio
    async def test_trigger_unknown_job_raises(self):
        with pytest.raises(ValueError, match="not found"):
            await scheduler.trigger_job_manually("missing")

    @pytest.mark.asyncio
    async def test_trigger_returns_job_result(self):
        job = AsyncMock(return_value={"purged": 3})
        scheduler.register_job("test_job", job, IntervalTrigger(hours=1))

        result = await scheduler.trigger_job_manually("test_job")

        assert result["status"] == "success"
        assert result["result"] == {"purged": 3}
        job.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_trigger_reports_job_failure(self):
        scheduler.register_job("test_job", AsyncMock(side_effect=RuntimeError("boom")), IntervalTrigger(hours=1))

        result = await scheduler.trigger_job_manually("test_job")

        assert result["status"] == "error"
        assert result["error"] == "boom"
