"""
Adaptive Level Generation Example

Generates a short run of levels for one player, feeding each finished level's
results back into the profile and raising the difficulty between levels.
"""

import logging

from levelsmith import GeneratorOptions, LevelAssembler
from levelsmith.misc.logging_config import setup_logger
from levelsmith.procedural.engine import OBJECTIVE_COMPLETED

print("=" * 60)
print("Adaptive Level Generation Demo")
print("=" * 60)

options = GeneratorOptions.from_dict({
    "maxObjectives": 5,
    "secretAreaChance": 0.5,
    "bonusObjectiveChance": 0.6,
    "seed": 2024,
})
setup_logger(level=logging.INFO)
assembler = LevelAssembler(options=options, verbose=True)

# Terrain data is opaque to the generator; the default placement oracle only
# reads the map bounds from it.
terrain = {"bounds": {"minX": -800, "maxX": 800, "minZ": -800, "maxZ": 800}}

player = {
    "level": 4,
    "zombiesKilled": 120,
    "distanceTraveled": 6000,
    "objectivesCompleted": 9,
    "secretsFound": 2,
    "averageCompletionTime": 260,
}

assembler.register_callback(OBJECTIVE_COMPLETED, lambda oid, data: print(f"  -> completed {oid}"))

difficulty = 1.0
for run in range(3):
    level = assembler.generate_level(player, terrain, difficulty)

    print(f"\nLevel {run + 1} (difficulty {difficulty:.2f}, ~{level.estimated_duration}s)")
    print(f"  Skill {level.metadata.player_skill_rating:.2f}, style {level.metadata.preferred_play_style.value}")
    if level.metadata.adaptations:
        print(f"  Adaptations: {', '.join(level.metadata.adaptations)}")

    for objective in level.all_objectives():
        timer = f", {objective.time_limit}s" if objective.time_limit else ""
        print(f"  [{objective.category.value}] {objective.description} ({objective.reward} pts{timer})")
    for secret in level.secret_areas:
        print(f"  [secret] {secret.name} at ({secret.location.x:.0f}, {secret.location.z:.0f})")
    print(f"  Checkpoints: {', '.join(c.purpose for c in level.checkpoints)}")
    print(f"  Reward balance: {level.rewards.balance.value} ({level.rewards.total} total)")

    # Pretend the player cleared the primaries
    first = level.objectives.primary[0]
    package = assembler.complete_objective(first.id, {"reward": first.reward, "difficulty": difficulty})
    print(f"  Payout: {package.currency} currency, {package.experience} xp, {len(package.items)} item(s)")

    player["level"] += 1
    player["objectivesCompleted"] += len(level.objectives.primary)
    player["zombiesKilled"] += 60
    player["distanceTraveled"] += 2500
    difficulty = options.next_difficulty(difficulty)

stats = assembler.get_level_stats()
print(f"\nGenerated {stats.levels_generated} levels, average difficulty {stats.average_difficulty:.2f}")
