import argparse
import sys
from pathlib import Path

from omegaconf import OmegaConf

from .common.config import ConfigManager
from .common.exceptions import OccupancyError
from .common.logging import setup_logger, set_package_level
from .common.schemas import ObservationSubmission
from .prediction.application import (
    PredictionApplicationBuilder,
    busy_periods,
    quiet_periods,
)
from .prediction.domain import current_day_of_week

logger = setup_logger(__name__)


def _print_day(location_id, day, predictions, min_confidence):
    print(f"Predictions for {location_id} (day {day})")
    for p in predictions:
        print(f"  {p.time_slot}  {p.predicted_occupancy.value:<6}  {p.confidence:.0%}")
    busy = ", ".join(p.time_slot for p in busy_periods(predictions, min_confidence)) or "-"
    quiet = ", ".join(p.time_slot for p in quiet_periods(predictions, min_confidence)) or "-"
    print(f"Busy: {busy}")
    print(f"Quiet: {quiet}")


def main(argv=None) -> int:
    """
    Command line entry point.
    """
    parser = argparse.ArgumentParser(description="Campus occupancy forecasting")
    parser.add_argument('--config-dir', default="conf", help="Directory holding prediction/<profile>.yaml")
    parser.add_argument('--profile', default="default")
    subparsers = parser.add_subparsers(dest='command', required=True)

    predict = subparsers.add_parser('predict', help="Print the day vector for a location")
    predict.add_argument('location_id')
    predict.add_argument('--day', type=int, choices=range(7), default=None, help="0 = Sunday")

    record = subparsers.add_parser('record', help="Record an occupancy observation")
    record.add_argument('location_id')
    record.add_argument('level', choices=['low', 'medium', 'high'])
    record.add_argument('--wait-time', type=float, default=None)
    record.add_argument('--name', default=None)

    args, unknown = parser.parse_known_args(argv)

    try:
        manager = ConfigManager(Path(args.config_dir))
        cfg = manager.load_prediction_config(args.profile)
        # Merge with CLI overrides
        cfg = ConfigManager.from_mapping(OmegaConf.merge(cfg, OmegaConf.from_dotlist(unknown)))
        set_package_level(cfg.log_level)

        service = PredictionApplicationBuilder(cfg).build_service()

        if args.command == 'predict':
            day = current_day_of_week() if args.day is None else args.day
            predictions = service.get_predictions(args.location_id, day)
            _print_day(args.location_id, day, predictions, cfg.prediction.min_insight_confidence)
        else:
            observation = service.record_observation(ObservationSubmission(
                location_id=args.location_id,
                location_name=args.name,
                occupancy_level=args.level,
                wait_time=args.wait_time,
            ))
            print(f"Recorded {observation.id} (day {observation.day_of_week}, interval {observation.time_interval})")
    except OccupancyError as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
