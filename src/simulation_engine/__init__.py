from src.simulation_engine.models import OddsSimulationResult
from src.simulation_engine.odds_simulator import OddsSimulator

__all__ = ["OddsSimulationResult", "OddsSimulator"]
