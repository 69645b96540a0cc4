#!/usr/bin/env python3
"""
Matching Dispatcher - Fire-and-forget trigger for matching runs.

A posting-created hook calls trigger(job_id) and returns immediately. The run
itself happens either on an rq worker (when Redis is reachable and the async
queue is enabled) or on a daemon thread in this process. Failures never reach
the caller: rq records them as failed jobs, the thread path logs them.

Usage:
    from pipeline.dispatcher import MatchingDispatcher

    dispatcher = MatchingDispatcher(config.queue, local_runner=run_locally)
    dispatcher.trigger("job-123")
"""

import os
import logging
import threading
from typing import Any, Callable, Optional

from redis import Redis
from rq import Queue, Retry

from core.config_loader import QueueConfig
from pipeline.runner import run_matching_task

logger = logging.getLogger(__name__)

DEFAULT_REDIS_URL = 'redis://localhost:6379/0'


class MatchingDispatcher:
    """Routes matching runs to the rq queue, or to a background thread."""

    def __init__(
        self,
        queue_config: Optional[QueueConfig] = None,
        local_runner: Optional[Callable[[str], Any]] = None,
        task: Callable[..., Any] = run_matching_task
    ):
        """
        Initialize the dispatcher.

        Args:
            queue_config: Queue settings (async mode, Redis URL, queue name, timeouts)
            local_runner: Callable run on a daemon thread when the queue is unavailable
            task: Function enqueued on the rq queue
        """
        self.config = queue_config or QueueConfig()
        self.local_runner = local_runner or task
        self.task = task

        self.redis_url = self.config.redis_url or os.environ.get('REDIS_URL', DEFAULT_REDIS_URL)

        if not self.config.use_async_queue:
            logger.info("Async queue disabled via config. Matching runs on background threads.")
            self.redis_conn = None
            self.queue = None
            self.async_mode = False
        else:
            try:
                self.redis_conn = Redis.from_url(self.redis_url)
                self.redis_conn.ping()
                self.queue = Queue(self.config.name, connection=self.redis_conn)
                self.async_mode = True
                logger.info(f"Matching dispatcher connected to Redis (queue={self.config.name})")
            except Exception as e:
                logger.error(f"Redis connection failed: {e}. Falling back to background threads.")
                self.redis_conn = None
                self.queue = None
                self.async_mode = False

    def trigger(self, job_id: str) -> Optional[str]:
        """
        Start a matching run for job_id without waiting for it.

        Returns:
            rq job id when queued, None when the run was handed to a thread
        """
        if self.async_mode:
            try:
                retry_policy = Retry(max=self.config.retry_max) if self.config.retry_max > 0 else None
                job = self.queue.enqueue(
                    self.task,
                    job_id,
                    job_timeout=self.config.job_timeout_seconds,
                    retry=retry_policy,
                    description=f"match job post {job_id}"
                )
                logger.info(f"Queued matching for job {job_id} as rq job {job.id}")
                return job.id
            except Exception as e:
                logger.error(f"Failed to enqueue matching for job {job_id}: {e}. Running in background thread.")

        self._start_thread(job_id)
        return None

    def _start_thread(self, job_id: str) -> threading.Thread:
        thread = threading.Thread(
            target=self._run_local,
            args=(job_id,),
            name=f"matching-{job_id}",
            daemon=True
        )
        thread.start()
        logger.info(f"Started background matching for job {job_id}")
        return thread

    def _run_local(self, job_id: str) -> None:
        try:
            self.local_runner(job_id)
        except Exception:
            logger.exception(f"Background matching failed for job {job_id}")
