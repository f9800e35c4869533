__version__ = "0.1.0"

# --- Data model ---
from .classes.profile import PlayerProgressProfile, PlayStyle
from .classes.objectives import (
    Objective,
    ObjectiveCategory,
    ObjectiveStatus,
    Requirement,
    SurvivalParameters,
    EliminationParameters,
    CollectionParameters,
    EscortParameters,
    ExplorationParameters,
    GenericParameters,
)
from .classes.level_objects import (
    Location,
    SecretArea,
    SecretAreaType,
    SecretContents,
    Checkpoint,
    CheckpointType,
    RewardBalance,
    RewardDistribution,
    LevelDefinition,
)

# --- Catalog ---
from .resources.objective_catalog import (
    ObjectiveCatalog,
    ObjectiveTemplate,
    Variant,
    default_catalog,
)

# --- Terrain seam ---
from .terrain.placement import PlacementOracle, ScatterPlacementOracle

# --- Generator ---
from .procedural import (
    GeneratorOptions,
    LevelAssembler,
    RandomProvider,
    Randomizer,
    LevelGenerationError,
    InvalidConfigurationError,
)

from .misc.logger import create_logger
_logger = create_logger(verbose=False, name="levelsmith")
_logger.debug(f"levelsmith {__version__} loaded.")
