# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 Custodia Authors

# @generated by custodia-codegen. DO NOT EDIT BY HAND


from typing import Any, Callable, Dict, Optional

from ..client import ActivityClient
from . import sdk_api_types as api_types


class SdkClientBase(ActivityClient):
    """Generated bindings, one coroutine per API operation."""

    async def get_activity(self, input: api_types.GetActivityBody) -> api_types.GetActivityResponse:
        return await self.request("/public/v1/query/get_activity", self.query_body(input))

    async def get_activities(self, input: Optional[api_types.GetActivitiesBody] = None) -> api_types.GetActivitiesResponse:
        return await self.request("/public/v1/query/list_activities", self.query_body(input))

    async def get_organization(self, input: Optional[api_types.GetOrganizationBody] = None) -> api_types.GetOrganizationResponse:
        return await self.request("/public/v1/query/get_organization", self.query_body(input))

    async def get_whoami(self, input: Optional[api_types.GetWhoamiBody] = None) -> api_types.GetWhoamiResponse:
        return await self.request("/public/v1/query/whoami", self.query_body(input))

    async def get_wallets(self, input: Optional[api_types.GetWalletsBody] = None) -> api_types.GetWalletsResponse:
        return await self.request("/public/v1/query/list_wallets", self.query_body(input))

    async def get_wallet_accounts(self, input: api_types.GetWalletAccountsBody) -> api_types.GetWalletAccountsResponse:
        return await self.request("/public/v1/query/list_wallet_accounts", self.query_body(input))

    async def list_private_key_tags(self, input: Optional[api_types.ListPrivateKeyTagsBody] = None) -> api_types.ListPrivateKeyTagsResponse:
        return await self.request("/public/v1/query/list_private_key_tags", self.query_body(input))

    async def approve_activity(self, input: api_types.ApproveActivityBody) -> api_types.ApproveActivityResponse:
        return await self.activity_decision(
            "/public/v1/submit/approve_activity",
            self.activity_body(input, "ACTIVITY_TYPE_APPROVE_ACTIVITY"),
        )

    async def reject_activity(self, input: api_types.RejectActivityBody) -> api_types.RejectActivityResponse:
        return await self.activity_decision(
            "/public/v1/submit/reject_activity",
            self.activity_body(input, "ACTIVITY_TYPE_REJECT_ACTIVITY"),
        )

    async def create_private_keys(self, input: api_types.CreatePrivateKeysBody) -> api_types.CreatePrivateKeysResponse:
        return await self.command(
            "/public/v1/submit/create_private_keys",
            self.activity_body(input, "ACTIVITY_TYPE_CREATE_PRIVATE_KEYS_V2"),
            "createPrivateKeysResultV2",
        )

    async def create_sub_organization(self, input: api_types.CreateSubOrganizationBody) -> api_types.CreateSubOrganizationResponse:
        return await self.command(
            "/public/v1/submit/create_sub_organization",
            self.activity_body(input, "ACTIVITY_TYPE_CREATE_SUB_ORGANIZATION_V5"),
            "createSubOrganizationResultV5",
        )

    async def create_users(self, input: api_types.CreateUsersBody) -> api_types.CreateUsersResponse:
        return await self.command(
            "/public/v1/submit/create_users",
            self.activity_body(input, "ACTIVITY_TYPE_CREATE_USERS_V2"),
            "createUsersResult",
        )

    async def create_wallet(self, input: api_types.CreateWalletBody) -> api_types.CreateWalletResponse:
        return await self.command(
            "/public/v1/submit/create_wallet",
            self.activity_body(input, "ACTIVITY_TYPE_CREATE_WALLET"),
            "createWalletResult",
        )

    async def create_wallet_accounts(self, input: api_types.CreateWalletAccountsBody) -> api_types.CreateWalletAccountsResponse:
        return await self.command(
            "/public/v1/submit/create_wallet_accounts",
            self.activity_body(input, "ACTIVITY_TYPE_CREATE_WALLET_ACCOUNTS"),
            "createWalletAccountsResult",
        )

    async def delete_users(self, input: api_types.DeleteUsersBody) -> api_types.DeleteUsersResponse:
        return await self.command(
            "/public/v1/submit/delete_users",
            self.activity_body(input, "ACTIVITY_TYPE_DELETE_USERS"),
            "deleteUsersResult",
        )

    async def email_auth(self, input: api_types.EmailAuthBody) -> api_types.EmailAuthResponse:
        return await self.command(
            "/public/v1/submit/email_auth",
            self.activity_body(input, "ACTIVITY_TYPE_EMAIL_AUTH"),
            "emailAuthResult",
        )

    async def init_user_email_recovery(self, input: api_types.InitUserEmailRecoveryBody) -> api_types.InitUserEmailRecoveryResponse:
        return await self.command(
            "/public/v1/submit/init_user_email_recovery",
            self.activity_body(input, "ACTIVITY_TYPE_INIT_USER_EMAIL_RECOVERY"),
            "initUserEmailRecoveryResult",
        )

    async def sign_raw_payload(self, input: api_types.SignRawPayloadBody) -> api_types.SignRawPayloadResponse:
        return await self.command(
            "/public/v1/submit/sign_raw_payload",
            self.activity_body(input, "ACTIVITY_TYPE_SIGN_RAW_PAYLOAD_V2"),
            "signRawPayloadResult",
        )

    async def sign_transaction(self, input: api_types.SignTransactionBody) -> api_types.SignTransactionResponse:
        return await self.command(
            "/public/v1/submit/sign_transaction",
            self.activity_body(input, "ACTIVITY_TYPE_SIGN_TRANSACTION_V2"),
            "signTransactionResult",
        )


# Proxy-callable name -> unbound method
API_METHODS: Dict[str, Callable[..., Any]] = {
    "getActivity": SdkClientBase.get_activity,
    "getActivities": SdkClientBase.get_activities,
    "getOrganization": SdkClientBase.get_organization,
    "getWhoami": SdkClientBase.get_whoami,
    "getWallets": SdkClientBase.get_wallets,
    "getWalletAccounts": SdkClientBase.get_wallet_accounts,
    "listPrivateKeyTags": SdkClientBase.list_private_key_tags,
    "approveActivity": SdkClientBase.approve_activity,
    "rejectActivity": SdkClientBase.reject_activity,
    "createPrivateKeys": SdkClientBase.create_private_keys,
    "createSubOrganization": SdkClientBase.create_sub_organization,
    "createUsers": SdkClientBase.create_users,
    "createWallet": SdkClientBase.create_wallet,
    "createWalletAccounts": SdkClientBase.create_wallet_accounts,
    "deleteUsers": SdkClientBase.delete_users,
    "emailAuth": SdkClientBase.email_auth,
    "initUserEmailRecovery": SdkClientBase.init_user_email_recovery,
    "signRawPayload": SdkClientBase.sign_raw_payload,
    "signTransaction": SdkClientBase.sign_transaction,
}
