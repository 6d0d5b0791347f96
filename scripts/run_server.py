import os
import sys
import hydra
import uvicorn
from omegaconf import DictConfig

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from campus_occupancy.common.config import ConfigManager
from campus_occupancy.common.logging import setup_logger, set_package_level
from campus_occupancy.prediction.application import PredictionApplicationBuilder
from campus_occupancy.prediction.presentation import api

@hydra.main(version_base=None, config_path="../conf", config_name="config")
def main(cfg: DictConfig):
    cfg = ConfigManager.from_mapping(cfg)
    logger = setup_logger(__name__, cfg.log_level)
    set_package_level(cfg.log_level)
    logger.info("Configuration loaded.")

    service = PredictionApplicationBuilder(cfg).build_service()
    api.init_service(service, min_insight_confidence=cfg.prediction.min_insight_confidence)

    logger.info(f"Starting server at http://{cfg.server.host}:{cfg.server.port}")
    uvicorn.run(api.app, host=cfg.server.host, port=cfg.server.port)

if __name__ == "__main__":
    main()
