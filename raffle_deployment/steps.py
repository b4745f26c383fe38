"""
Tagged deployment steps.

Each step is a function taking a ``DeploymentContext``. Steps are registered
under a sortable name (``00-deploy-mocks``, ``01-deploy-raffle``, ...) and a
set of tags; a run executes every step carrying a requested tag, in name order.
"""

import importlib
from typing import Any, Callable, Dict, Iterable, List, NamedTuple, Tuple

from ape.api import AccountAPI

from raffle_deployment.accounts import get_named_account
from raffle_deployment.constants import ALL
from raffle_deployment.deployer import ContractDeployer
from raffle_deployment.networks import ActiveNetwork

STEP_MODULES = (
    "raffle_deployment.mocks",
    "raffle_deployment.raffle",
)


class DeploymentContext:
    """What the framework hands to each step: network, deployer and accounts."""

    def __init__(self, network: ActiveNetwork, deployer: ContractDeployer, autosign: bool = False):
        self.network = network
        self.deployer = deployer
        self.autosign = autosign
        self._named_accounts: Dict[str, AccountAPI] = dict()

    def get_named_account(self, role: str) -> AccountAPI:
        if role not in self._named_accounts:
            self._named_accounts[role] = get_named_account(
                role, self.network.name, autosign=self.autosign
            )
        return self._named_accounts[role]


StepFunction = Callable[[DeploymentContext], Any]


class DeploymentStep(NamedTuple):
    name: str
    func: StepFunction
    tags: Tuple[str, ...]

    def __call__(self, context: DeploymentContext) -> Any:
        return self.func(context)


class StepRegistry:
    def __init__(self):
        self._steps: Dict[str, DeploymentStep] = dict()

    def register(self, name: str, tags: Iterable[str]) -> Callable[[StepFunction], StepFunction]:
        tags = tuple(tags)
        if not tags:
            raise ValueError(f"Deployment step '{name}' needs at least one tag.")

        def decorator(func: StepFunction) -> StepFunction:
            if name in self._steps:
                raise ValueError(f"Deployment step '{name}' is already registered.")
            self._steps[name] = DeploymentStep(name=name, func=func, tags=tags)
            return func

        return decorator

    @property
    def steps(self) -> List[DeploymentStep]:
        return [self._steps[name] for name in sorted(self._steps)]

    @property
    def tags(self) -> List[str]:
        return sorted({tag for step in self._steps.values() for tag in step.tags})

    def select(self, tags: Iterable[str] = (ALL,)) -> List[DeploymentStep]:
        """Returns the steps carrying any of the tags, in execution order."""
        tags = set(tags)
        return [step for step in self.steps if tags.intersection(step.tags)]

    def run(self, context: DeploymentContext, tags: Iterable[str] = (ALL,)) -> Dict[str, Any]:
        results = dict()
        for step in self.select(tags):
            print(f"\n--- Running step {step.name} ---")
            results[step.name] = step(context)
        return results


STEPS = StepRegistry()


def deployment_step(name: str, tags: Iterable[str]) -> Callable[[StepFunction], StepFunction]:
    """Registers a function as a deployment step."""
    return STEPS.register(name, tags)


def load_steps() -> StepRegistry:
    for module in STEP_MODULES:
        importlib.import_module(module)
    return STEPS


def select_steps(tags: Iterable[str] = (ALL,)) -> List[DeploymentStep]:
    return load_steps().select(tags)


def run_steps(context: DeploymentContext, tags: Iterable[str] = (ALL,)) -> Dict[str, Any]:
    return load_steps().run(context, tags)
