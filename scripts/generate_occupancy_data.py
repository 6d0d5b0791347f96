import argparse
import datetime
import os
import random
import sys

import numpy as np
import pandas as pd

# Add project root to path to import the package
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from campus_occupancy.common.schemas import ObservationSubmission

# Simulation Configuration
NUM_SAMPLES = 3000
LOCATIONS = {
    # Location ID : Display name
    "main-canteen": "Main Campus Canteen",
    "express-food-court": "Express Food Court",
    "healthy-bites": "Healthy Bites",
    "coffee-corner": "Coffee Corner",
}
LEVELS = ["low", "medium", "high"]
MEAL_HOURS = [8, 12, 13, 18, 19]
WAIT_MINUTES = {"low": (0, 5), "medium": (4, 12), "high": (10, 25)}


def level_weights(hour: int, weekday: int) -> np.ndarray:
    """Probability of low/medium/high for an hour of the day."""
    if hour in MEAL_HOURS:
        weights = np.array([0.1, 0.3, 0.6])
    elif 9 <= hour <= 17:
        weights = np.array([0.3, 0.5, 0.2])
    else:
        weights = np.array([0.7, 0.25, 0.05])

    # Quieter weekends (datetime.weekday: 5 = Saturday, 6 = Sunday)
    if weekday >= 5:
        weights = weights * np.array([1.5, 1.0, 0.5])
    return weights / weights.sum()


def generate_data(num_samples=NUM_SAMPLES, days_back=28, output_file="data/prediction/occupancy_synthetic.csv"):
    print(f"Generating {num_samples} synthetic occupancy observations...")

    records = []
    now = datetime.datetime.now().replace(second=0, microsecond=0)

    for _ in range(num_samples):
        # Meal time probability
        if random.random() > 0.4:
            hour = random.choice(MEAL_HOURS)
        else:
            hour = random.randint(7, 21)

        observed_at = (now - datetime.timedelta(days=random.randint(0, days_back))).replace(
            hour=hour, minute=random.randint(0, 59)
        )
        if observed_at > now:
            observed_at -= datetime.timedelta(days=7)

        location_id = random.choice(list(LOCATIONS))
        level = str(np.random.choice(LEVELS, p=level_weights(hour, observed_at.weekday())))
        low, high = WAIT_MINUTES[level]

        submission = ObservationSubmission(
            location_id=location_id,
            location_name=LOCATIONS[location_id],
            occupancy_level=level,
            wait_time=round(random.uniform(low, high), 1),
            user_id=f"student-{random.randint(1, 200):03d}",
            observed_at=observed_at,
        )
        records.append(submission.model_dump())

    df = pd.DataFrame(records).sort_values(by="observed_at")
    print(df.head())

    # Ensure output directory exists
    os.makedirs(os.path.dirname(output_file) or ".", exist_ok=True)

    df.to_csv(output_file, index=False)
    print(f"Dataset saved to {output_file}")
    return df


def load_into_store(df: pd.DataFrame, database_url: str):
    """Records every generated row through the prediction service."""
    from campus_occupancy.common.config import ConfigManager
    from campus_occupancy.prediction.application import PredictionApplicationBuilder

    cfg = ConfigManager.from_mapping({"database": {"url": database_url}})
    service = PredictionApplicationBuilder(cfg).build_service()

    for record in df.to_dict(orient="records"):
        record["observed_at"] = pd.Timestamp(record["observed_at"]).to_pydatetime()
        service.record_observation(ObservationSubmission(**record))
    print(f"Loaded {len(df)} observations into {database_url}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Generate synthetic occupancy observations")
    parser.add_argument('--samples', type=int, default=NUM_SAMPLES)
    parser.add_argument('--output', default="data/prediction/occupancy_synthetic.csv")
    parser.add_argument('--load', metavar='DATABASE_URL', help="Also store the observations in this database")
    args = parser.parse_args()

    data = generate_data(num_samples=args.samples, output_file=args.output)
    if args.load:
        load_into_store(data, args.load)
