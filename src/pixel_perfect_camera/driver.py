"""Fixed-step simulation ticks plus one presentation tick per frame."""

from __future__ import annotations

from pixel_perfect_camera.corrector import Tick
from pixel_perfect_camera.settings import MAX_PHYSICS_STEPS, PHYSICS_HZ


class FrameDriver:
    """Turns variable frame times into Tick dispatches.

    Each advance() runs the simulation callback once per elapsed fixed step
    (at most max_steps; surplus time is dropped so a slow frame can't snowball),
    then the presentation callback once. Both get the Tick they represent.
    """

    def __init__(self, on_simulation, on_presentation, physics_hz: float = PHYSICS_HZ,
                 max_steps: int = MAX_PHYSICS_STEPS):
        if physics_hz <= 0:
            raise ValueError(f"physics_hz must be positive, got {physics_hz}")
        self.on_simulation = on_simulation
        self.on_presentation = on_presentation
        self.step = 1.0 / physics_hz
        self.max_steps = max_steps
        self.accumulator = 0.0
        self.simulation_ticks = 0
        self.presentation_ticks = 0

    def advance(self, dt: float) -> int:
        """Dispatch the ticks for a frame of *dt* seconds. Returns simulation steps run."""
        self.accumulator += max(0.0, dt)
        steps = 0
        while self.accumulator >= self.step and steps < self.max_steps:
            self.on_simulation(Tick.SIMULATION, self.step)
            self.accumulator -= self.step
            steps += 1
        if steps == self.max_steps and self.accumulator >= self.step:
            self.accumulator = self.accumulator % self.step
        self.simulation_ticks += steps

        self.on_presentation(Tick.PRESENTATION, dt)
        self.presentation_ticks += 1
        return steps
