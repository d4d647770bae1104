# Monte Carlo parameters
DEFAULT_SIMULATION_RUNS = 10_000

# Largest acceptable |observed - expected| for pick 1, in percentage points,
# when reporting a simulation against the odds table
PICK_ONE_TOLERANCE = 1.0
