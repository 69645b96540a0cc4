#!/usr/bin/env python3
"""
RQ Worker for background matching runs.

Consumes the queue MatchingDispatcher enqueues on and executes
pipeline.runner.run_matching_task for each job post id.

Usage:
    python -m pipeline.worker
    python -m pipeline.worker --burst
    python -m pipeline.worker --config config.yaml --verbose
"""

import os
import sys
import argparse
import logging
from typing import Optional

from redis import Redis
from rq import Worker

from core.config_loader import QueueConfig, load_config
from pipeline.dispatcher import DEFAULT_REDIS_URL

logger = logging.getLogger(__name__)


def start_worker(queue_config: Optional[QueueConfig] = None, burst: bool = False):
    """Block processing matching jobs until stopped (or the queue drains, with burst)."""
    queue_config = queue_config or QueueConfig()
    redis_url = queue_config.redis_url or os.environ.get('REDIS_URL', DEFAULT_REDIS_URL)

    logger.info(f"Starting matching worker on queue '{queue_config.name}' ({redis_url}), burst={burst}")

    try:
        redis_conn = Redis.from_url(redis_url)
        redis_conn.ping()
        worker = Worker([queue_config.name], connection=redis_conn)
        worker.work(burst=burst)
    except KeyboardInterrupt:
        logger.info("Matching worker stopped")
    except Exception as e:
        logger.error(f"Matching worker failed: {e}")
        sys.exit(1)


def main():
    parser = argparse.ArgumentParser(description='Matching queue worker')
    parser.add_argument('--config', default=os.environ.get('CONFIG_PATH', 'config.yaml'))
    parser.add_argument('--burst', action='store_true', help='Drain the queue and exit')
    parser.add_argument('--verbose', action='store_true')
    args = parser.parse_args()

    config = load_config(args.config)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.logging.level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    start_worker(config.queue, burst=args.burst)


if __name__ == '__main__':
    main()
