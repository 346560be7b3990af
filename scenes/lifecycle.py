"""Scene lifecycle - menu and simulation phases with setup/teardown hooks."""

from enum import Enum
from typing import Callable, Dict, List, Optional

from particles import Bounds, ParticleStore, SimulationConstants, ViewportUnavailableError


class SceneState(Enum):
    MENU_ACTIVE = "menu"
    SIMULATION_ACTIVE = "simulation"


Hook = Callable[[], None]


class SceneLifecycle:
    """
    Two-state machine governing when the simulation is active.

    The particle store is populated exactly while the state is
    SIMULATION_ACTIVE. Collaborators (camera, renderer, menu) attach setup
    and teardown through ``on_enter``/``on_exit``; teardown hooks must be
    no-ops when their resource is already gone.
    """

    def __init__(
        self,
        store: Optional[ParticleStore] = None,
        constants_factory: Callable[[], SimulationConstants] = SimulationConstants.from_config
    ):
        self.store = store if store is not None else ParticleStore()
        self.constants_factory = constants_factory
        self.constants: Optional[SimulationConstants] = None
        self.bounds: Optional[Bounds] = None
        self.state = SceneState.MENU_ACTIVE
        self._enter_hooks: Dict[SceneState, List[Hook]] = {s: [] for s in SceneState}
        self._exit_hooks: Dict[SceneState, List[Hook]] = {s: [] for s in SceneState}

    def on_enter(self, state: SceneState, hook: Hook):
        self._enter_hooks[state].append(hook)

    def on_exit(self, state: SceneState, hook: Hook):
        self._exit_hooks[state].append(hook)

    @property
    def simulation_active(self) -> bool:
        return self.state is SceneState.SIMULATION_ACTIVE

    def start(self):
        """Run setup for the initial scene."""
        self._run(self._enter_hooks[self.state])
        print(f"[Scene] {self.state.name} loaded")

    def play(self, bounds: Optional[Bounds]) -> bool:
        """
        MENU_ACTIVE -> SIMULATION_ACTIVE.

        Builds the episode's constants and spawns the particle lattice over
        ``bounds``. Ignored outside the menu.

        Returns:
            True if the transition happened
        """
        if self.state is not SceneState.MENU_ACTIVE:
            return False
        if bounds is None:
            raise ViewportUnavailableError("cannot start the simulation without a viewport")

        self._run(self._exit_hooks[SceneState.MENU_ACTIVE])

        self.constants = self.constants_factory()
        self.store.spatial_interval = self.constants.spatial_interval
        self.bounds = Bounds(*bounds)
        self.store.populate(self.bounds)
        self.state = SceneState.SIMULATION_ACTIVE

        self._run(self._enter_hooks[SceneState.SIMULATION_ACTIVE])
        print("[Scene] Particles loaded")
        return True

    def cancel(self) -> bool:
        """
        SIMULATION_ACTIVE -> MENU_ACTIVE.

        Discards the particle population and tears down simulation resources,
        then rebuilds the menu. Ignored outside the simulation.

        Returns:
            True if the transition happened
        """
        if self.state is not SceneState.SIMULATION_ACTIVE:
            return False

        self.store.clear()
        self.constants = None
        self._run(self._exit_hooks[SceneState.SIMULATION_ACTIVE])
        self.state = SceneState.MENU_ACTIVE

        self._run(self._enter_hooks[SceneState.MENU_ACTIVE])
        print("[Scene] Main menu loaded")
        return True

    def resize(self, bounds: Bounds):
        """Track the latest viewport; the next frame's bounds checks use it."""
        self.bounds = Bounds(*bounds)

    def shutdown(self):
        """Tear down whichever scene is active (process exit)."""
        if self.state is SceneState.SIMULATION_ACTIVE:
            self.store.clear()
            self.constants = None
        self._run(self._exit_hooks[self.state])

    @staticmethod
    def _run(hooks: List[Hook]):
        for hook in hooks:
            hook()
