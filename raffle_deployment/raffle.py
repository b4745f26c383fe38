from typing import Any, List, Tuple

from ape.api import AccountAPI
from ape.contracts import ContractInstance

from raffle_deployment.constants import (
    ALL,
    RAFFLE,
    RAFFLE_TAG,
    VRF_COORDINATOR_MOCK,
    VRF_SUB_FUND_AMOUNT,
)
from raffle_deployment.deployer import ContractDeployer
from raffle_deployment.networks import ChainProfile, is_public_profile, lookup_profile
from raffle_deployment.steps import DeploymentContext, deployment_step


def create_mock_subscription(vrf_coordinator_mock: ContractInstance, sender: AccountAPI) -> int:
    """Creates and funds a VRF subscription on the mock coordinator."""
    receipt = vrf_coordinator_mock.createSubscription(sender=sender)
    subscription_id = receipt.events.filter(vrf_coordinator_mock.SubscriptionCreated)[0].subId
    vrf_coordinator_mock.fundSubscription(subscription_id, VRF_SUB_FUND_AMOUNT, sender=sender)
    print(f"Created mock VRF subscription {subscription_id} funded with {VRF_SUB_FUND_AMOUNT}")
    return subscription_id


def resolve_coordinator(
    profile: ChainProfile, deployer: ContractDeployer, sender: AccountAPI
) -> Tuple[str, int]:
    """Returns the VRF coordinator address and subscription id to use on a chain."""
    if is_public_profile(profile):
        return profile.vrf_coordinator, profile.subscription_id

    # local chains use the mock deployed by the mocks step, in this run or an earlier one
    vrf_coordinator_mock = deployer.get(VRF_COORDINATOR_MOCK)
    subscription_id = create_mock_subscription(vrf_coordinator_mock, sender=sender)
    return vrf_coordinator_mock.address, subscription_id


def raffle_constructor_args(
    vrf_coordinator: str, subscription_id: int, profile: ChainProfile
) -> List[Any]:
    return [
        vrf_coordinator,
        profile.entrance_fee,
        profile.gas_lane,
        subscription_id,
        profile.callback_gas_limit,
        profile.interval,
    ]


@deployment_step("01-deploy-raffle", tags=(ALL, RAFFLE_TAG))
def deploy_raffle(context: DeploymentContext) -> ContractInstance:
    profile = lookup_profile(context.network.chain_id)
    deployer_account = context.get_named_account("deployer")
    vrf_coordinator, subscription_id = resolve_coordinator(
        profile, deployer=context.deployer, sender=deployer_account
    )

    raffle = context.deployer.deploy(
        RAFFLE,
        sender=deployer_account,
        args=raffle_constructor_args(vrf_coordinator, subscription_id, profile),
        log=True,
    )

    if not is_public_profile(profile):
        vrf_coordinator_mock = context.deployer.get(VRF_COORDINATOR_MOCK)
        vrf_coordinator_mock.addConsumer(subscription_id, raffle.address, sender=deployer_account)
        print(f"Added {RAFFLE} at {raffle.address} as consumer of subscription {subscription_id}")

    return raffle
