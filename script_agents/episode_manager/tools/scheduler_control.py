"""
Scheduler status and control tools.
"""
from typing import Dict, Any


class SchedulerControlTool:
    """Tool for starting, stopping and triggering the daily scheduler"""

    def __init__(self, agent):
        self.agent = agent

    def register(self, server):
        """Register multiple tools with FastMCP server"""

        @server.tool(
            name="get_scheduler_status",
            description="Whether the scheduler runs, when it last ran, the next run time and the last run summary",
        )
        def get_scheduler_status() -> Dict[str, Any]:
            return self.get_status()

        @server.tool(
            name="start_scheduler",
            description="Start the daily scheduler; it processes upcoming episodes immediately, then daily",
        )
        def start_scheduler() -> Dict[str, Any]:
            return self.start()

        @server.tool(
            name="stop_scheduler",
            description="Stop the daily scheduler; a run in progress is allowed to finish",
        )
        def stop_scheduler() -> Dict[str, Any]:
            return self.stop()

        @server.tool(
            name="run_scheduler_once",
            description="Process upcoming episodes now (skipped if a run started less than a minute ago)",
        )
        def run_scheduler_once() -> Dict[str, Any]:
            return self.run_once()

    def get_status(self) -> Dict[str, Any]:
        return self.agent.create_success_response(
            data=self.agent.scheduler.get_status(),
            message="Scheduler status retrieved"
        )

    def start(self) -> Dict[str, Any]:
        started = self.agent.scheduler.start()
        if started:
            self.agent.log_event(event_type="scheduler_started", message="Scheduler started")
        return self.agent.create_success_response(
            data=self.agent.scheduler.get_status(),
            message="Scheduler started" if started else "Scheduler is already running"
        )

    def stop(self) -> Dict[str, Any]:
        stopped = self.agent.scheduler.stop()
        if stopped:
            self.agent.log_event(event_type="scheduler_stopped", message="Scheduler stopped")
        return self.agent.create_success_response(
            data=self.agent.scheduler.get_status(),
            message="Scheduler stopped" if stopped else "Scheduler is not running"
        )

    def run_once(self) -> Dict[str, Any]:
        try:
            summary = self.agent.scheduler.run_once()
            if summary is None:
                return self.agent.create_success_response(
                    data={"skipped": True},
                    message="Skipped - last run was less than a minute ago"
                )

            self.agent.log_event(
                event_type="scheduler_run",
                message=f"Processed {summary.successful}/{summary.candidates} upcoming episodes",
                payload={"successful": summary.successful, "failed": summary.failed}
            )
            return self.agent.create_success_response(
                data={"skipped": False, **summary.model_dump(mode="json")},
                message=f"Processed {summary.candidates} upcoming episodes"
            )
        except Exception as e:
            return self.agent.create_error_response(e)
