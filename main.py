import os
import sys
import json
import logging
import argparse
import threading

from core.app_context import AppContext
from core.config_loader import load_config
from database.init_db import init_db
from database.database import get_engine
from pipeline.dispatcher import MatchingDispatcher
from pipeline.runner import run_matching_pipeline
from pipeline.worker import start_worker

logger = logging.getLogger(__name__)


def configure_logging(level: str):
    logging.basicConfig(
        level=level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def cmd_init_db(ctx: AppContext, args) -> int:
    init_db(get_engine())
    logger.info("Database tables created")
    return 0


def cmd_match(ctx: AppContext, args) -> int:
    result = run_matching_pipeline(ctx, args.posting_id)
    if not result.success:
        logger.error(f"Matching failed: {result.error}")
        return 1

    top_n = args.top if args.top is not None else ctx.config.matching.log_top_n
    top = result.run.top(top_n)

    if args.json:
        payload = result.run.summary()
        payload['matches'] = [m.to_dict() for m in top]
        print(json.dumps(payload, indent=2))
        return 0

    print(f"Top {len(top)} Matches for job {args.posting_id}:")
    for rank, match in enumerate(top, start=1):
        print(f"{rank}. {match.name} ({match.email}) - Score: {match.total_score}")
        print(f"   {match.recommendation.summary}")
        for insight in match.recommendation.insights:
            print(f"   - {insight}")
    print(f"Saved {result.saved_count} new application(s) in {result.execution_time:.2f}s")
    return 0


def cmd_trigger(ctx: AppContext, args) -> int:
    dispatcher = MatchingDispatcher(
        ctx.config.queue,
        local_runner=lambda job_id: run_matching_pipeline(ctx, job_id)
    )
    rq_job_id = dispatcher.trigger(args.posting_id)
    if rq_job_id:
        print(f"Queued matching for {args.posting_id} as job {rq_job_id}")
        return 0

    # Daemon threads die with the process, so the CLI waits for the run here.
    for thread in threading.enumerate():
        if thread.name.startswith("matching-"):
            thread.join()
    return 0


def cmd_worker(ctx: AppContext, args) -> int:
    start_worker(ctx.config.queue, burst=args.burst)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Candidate/job matching engine")
    parser.add_argument('--config', default=os.environ.get('CONFIG_PATH', 'config.yaml'),
                        help='Path to config.yaml')
    subparsers = parser.add_subparsers(dest='command', required=True)

    init_parser = subparsers.add_parser('init-db', help='Create database tables')
    init_parser.set_defaults(func=cmd_init_db)

    match_parser = subparsers.add_parser('match', help='Run matching for a job post and wait for it')
    match_parser.add_argument('posting_id', help='Public job id of the posting')
    match_parser.add_argument('--top', type=int, default=None, help='Number of matches to print')
    match_parser.add_argument('--json', action='store_true', help='Print the run result as JSON')
    match_parser.set_defaults(func=cmd_match)

    trigger_parser = subparsers.add_parser('trigger', help='Start matching in the background')
    trigger_parser.add_argument('posting_id', help='Public job id of the posting')
    trigger_parser.set_defaults(func=cmd_trigger)

    worker_parser = subparsers.add_parser('worker', help='Start an rq worker for the matching queue')
    worker_parser.add_argument('--burst', action='store_true', help='Process all and exit')
    worker_parser.set_defaults(func=cmd_worker)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    config = load_config(args.config)
    configure_logging(config.logging.level)

    ctx = AppContext.build(config)
    return args.func(ctx, args)


if __name__ == "__main__":
    sys.exit(main())
