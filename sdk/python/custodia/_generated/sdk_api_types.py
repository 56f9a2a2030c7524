# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 Custodia Authors

# @generated by custodia-codegen. DO NOT EDIT BY HAND


from __future__ import annotations

from typing import Any, Dict, List, Literal, TypedDict


class ActivityMetadataInfo(TypedDict):
    id: str
    status: str


class ActivityMetadata(TypedDict):
    activity: ActivityMetadataInfo


class CommandOverrideParams(TypedDict, total=False):
    organizationId: str
    timestampMs: str


ActivityStatus = Literal["ACTIVITY_STATUS_CREATED", "ACTIVITY_STATUS_PENDING", "ACTIVITY_STATUS_COMPLETED", "ACTIVITY_STATUS_FAILED", "ACTIVITY_STATUS_CONSENSUS_NEEDED", "ACTIVITY_STATUS_REJECTED"]


ActivityType = Literal["ACTIVITY_TYPE_APPROVE_ACTIVITY", "ACTIVITY_TYPE_REJECT_ACTIVITY", "ACTIVITY_TYPE_CREATE_PRIVATE_KEYS", "ACTIVITY_TYPE_CREATE_PRIVATE_KEYS_V2", "ACTIVITY_TYPE_CREATE_SUB_ORGANIZATION", "ACTIVITY_TYPE_CREATE_SUB_ORGANIZATION_V4", "ACTIVITY_TYPE_CREATE_SUB_ORGANIZATION_V5", "ACTIVITY_TYPE_CREATE_USERS", "ACTIVITY_TYPE_CREATE_USERS_V2", "ACTIVITY_TYPE_CREATE_WALLET", "ACTIVITY_TYPE_CREATE_WALLET_ACCOUNTS", "ACTIVITY_TYPE_DELETE_USERS", "ACTIVITY_TYPE_EMAIL_AUTH", "ACTIVITY_TYPE_INIT_USER_EMAIL_RECOVERY", "ACTIVITY_TYPE_SIGN_RAW_PAYLOAD", "ACTIVITY_TYPE_SIGN_RAW_PAYLOAD_V2", "ACTIVITY_TYPE_SIGN_TRANSACTION", "ACTIVITY_TYPE_SIGN_TRANSACTION_V2"]


AddressFormat = Literal["ADDRESS_FORMAT_UNCOMPRESSED", "ADDRESS_FORMAT_COMPRESSED", "ADDRESS_FORMAT_ETHEREUM", "ADDRESS_FORMAT_SOLANA", "ADDRESS_FORMAT_COSMOS"]


Curve = Literal["CURVE_SECP256K1", "CURVE_ED25519"]


PathFormat = Literal["PATH_FORMAT_BIP32"]


HashFunction = Literal["HASH_FUNCTION_NO_OP", "HASH_FUNCTION_SHA256", "HASH_FUNCTION_KECCAK256", "HASH_FUNCTION_NOT_APPLICABLE"]


PayloadEncoding = Literal["PAYLOAD_ENCODING_HEXADECIMAL", "PAYLOAD_ENCODING_TEXT_UTF8"]


TransactionType = Literal["TRANSACTION_TYPE_ETHEREUM", "TRANSACTION_TYPE_SOLANA"]


class Activity(TypedDict, total=False):
    id: str
    organizationId: str
    status: ActivityStatus
    type: ActivityType
    intent: Dict[str, Any]
    result: Result
    fingerprint: str
    canApprove: bool
    canReject: bool
    createdAt: str
    updatedAt: str


class ActivityResponse(TypedDict, total=False):
    activity: Activity


class Result(TypedDict, total=False):
    approveActivityResult: ApproveActivityResult
    rejectActivityResult: RejectActivityResult
    createPrivateKeysResult: CreatePrivateKeysResult
    createPrivateKeysResultV2: CreatePrivateKeysResultV2
    createSubOrganizationResult: CreateSubOrganizationResult
    createSubOrganizationResultV3: CreateSubOrganizationResultV3
    createSubOrganizationResultV4: CreateSubOrganizationResultV4
    createSubOrganizationResultV5: CreateSubOrganizationResultV5
    createUsersResult: CreateUsersResult
    createWalletResult: CreateWalletResult
    createWalletAccountsResult: CreateWalletAccountsResult
    deleteUsersResult: DeleteUsersResult
    emailAuthResult: EmailAuthResult
    initUserEmailRecoveryResult: InitUserEmailRecoveryResult
    signRawPayloadResult: SignRawPayloadResult
    signTransactionResult: SignTransactionResult


class GetActivityRequest(TypedDict, total=False):
    organizationId: str
    activityId: str


class GetActivitiesRequest(TypedDict, total=False):
    organizationId: str
    filterByStatus: List[ActivityStatus]
    filterByType: List[ActivityType]


class GetActivitiesResponse(TypedDict, total=False):
    activities: List[Activity]


class GetOrganizationRequest(TypedDict, total=False):
    organizationId: str


class GetOrganizationResponse(TypedDict, total=False):
    organizationData: Dict[str, Any]


class GetWhoamiRequest(TypedDict, total=False):
    organizationId: str


class GetWhoamiResponse(TypedDict, total=False):
    organizationId: str
    organizationName: str
    userId: str
    username: str


class Wallet(TypedDict, total=False):
    walletId: str
    walletName: str
    createdAt: str
    updatedAt: str
    exported: bool
    imported: bool


class WalletAccount(TypedDict, total=False):
    organizationId: str
    walletId: str
    curve: Curve
    pathFormat: PathFormat
    path: str
    addressFormat: AddressFormat
    address: str


class WalletAccountParams(TypedDict, total=False):
    curve: Curve
    pathFormat: PathFormat
    path: str
    addressFormat: AddressFormat


class GetWalletsRequest(TypedDict, total=False):
    organizationId: str


class GetWalletsResponse(TypedDict, total=False):
    wallets: List[Wallet]


class GetWalletAccountsRequest(TypedDict, total=False):
    organizationId: str
    walletId: str


class GetWalletAccountsResponse(TypedDict, total=False):
    accounts: List[WalletAccount]


class ListPrivateKeyTagsRequest(TypedDict, total=False):
    organizationId: str


class ListPrivateKeyTagsResponse(TypedDict, total=False):
    privateKeyTags: List[Dict[str, Any]]


class ApproveActivityIntent(TypedDict, total=False):
    fingerprint: str


class ApproveActivityRequest(TypedDict, total=False):
    type: str
    timestampMs: str
    organizationId: str
    parameters: ApproveActivityIntent


class ApproveActivityResult(TypedDict, total=False):
    pass


class RejectActivityIntent(TypedDict, total=False):
    fingerprint: str


class RejectActivityRequest(TypedDict, total=False):
    type: str
    timestampMs: str
    organizationId: str
    parameters: RejectActivityIntent


class RejectActivityResult(TypedDict, total=False):
    pass


class PrivateKeyParams(TypedDict, total=False):
    privateKeyName: str
    curve: Curve
    privateKeyTags: List[str]
    addressFormats: List[AddressFormat]


class PrivateKeyResult(TypedDict, total=False):
    privateKeyId: str
    addresses: List[Dict[str, Any]]


class CreatePrivateKeysIntentV2(TypedDict, total=False):
    privateKeys: List[PrivateKeyParams]


class CreatePrivateKeysRequest(TypedDict, total=False):
    type: str
    timestampMs: str
    organizationId: str
    parameters: CreatePrivateKeysIntentV2


class CreatePrivateKeysResult(TypedDict, total=False):
    privateKeyIds: List[str]


class CreatePrivateKeysResultV2(TypedDict, total=False):
    privateKeys: List[PrivateKeyResult]


class RootUserParams(TypedDict, total=False):
    userName: str
    userEmail: str
    apiKeys: List[Dict[str, Any]]
    authenticators: List[Dict[str, Any]]


class WalletParams(TypedDict, total=False):
    walletName: str
    accounts: List[WalletAccountParams]
    mnemonicLength: int


class CreateSubOrganizationIntentV5(TypedDict, total=False):
    subOrganizationName: str
    rootUsers: List[RootUserParams]
    rootQuorumThreshold: int
    wallet: WalletParams


class CreateSubOrganizationRequest(TypedDict, total=False):
    type: str
    timestampMs: str
    organizationId: str
    parameters: CreateSubOrganizationIntentV5


class CreateSubOrganizationResult(TypedDict, total=False):
    subOrganizationId: str


class CreateSubOrganizationResultV3(TypedDict, total=False):
    subOrganizationId: str
    privateKeys: List[PrivateKeyResult]


class CreateSubOrganizationResultV4(TypedDict, total=False):
    subOrganizationId: str
    wallet: WalletResult


class CreateSubOrganizationResultV5(TypedDict, total=False):
    subOrganizationId: str
    wallet: WalletResult
    rootUserIds: List[str]


class WalletResult(TypedDict, total=False):
    walletId: str
    addresses: List[str]


class CreateUsersIntentV2(TypedDict, total=False):
    users: List[RootUserParams]


class CreateUsersRequest(TypedDict, total=False):
    type: str
    timestampMs: str
    organizationId: str
    parameters: CreateUsersIntentV2


class CreateUsersResult(TypedDict, total=False):
    userIds: List[str]


class CreateWalletIntent(TypedDict, total=False):
    walletName: str
    accounts: List[WalletAccountParams]
    mnemonicLength: int


class CreateWalletRequest(TypedDict, total=False):
    type: str
    timestampMs: str
    organizationId: str
    parameters: CreateWalletIntent


class CreateWalletResult(TypedDict, total=False):
    walletId: str
    addresses: List[str]


class CreateWalletAccountsIntent(TypedDict, total=False):
    walletId: str
    accounts: List[WalletAccountParams]


class CreateWalletAccountsRequest(TypedDict, total=False):
    type: str
    timestampMs: str
    organizationId: str
    parameters: CreateWalletAccountsIntent


class CreateWalletAccountsResult(TypedDict, total=False):
    addresses: List[str]


class DeleteUsersIntent(TypedDict, total=False):
    userIds: List[str]


class DeleteUsersRequest(TypedDict, total=False):
    type: str
    timestampMs: str
    organizationId: str
    parameters: DeleteUsersIntent


class DeleteUsersResult(TypedDict, total=False):
    userIds: List[str]


class EmailAuthIntent(TypedDict, total=False):
    email: str
    targetPublicKey: str
    apiKeyName: str
    expirationSeconds: str


class EmailAuthRequest(TypedDict, total=False):
    type: str
    timestampMs: str
    organizationId: str
    parameters: EmailAuthIntent


class EmailAuthResult(TypedDict, total=False):
    userId: str
    apiKeyId: str


class InitUserEmailRecoveryIntent(TypedDict, total=False):
    email: str
    targetPublicKey: str
    expirationSeconds: str


class InitUserEmailRecoveryRequest(TypedDict, total=False):
    type: str
    timestampMs: str
    organizationId: str
    parameters: InitUserEmailRecoveryIntent


class InitUserEmailRecoveryResult(TypedDict, total=False):
    userId: str


class SignRawPayloadIntentV2(TypedDict, total=False):
    signWith: str
    payload: str
    encoding: PayloadEncoding
    hashFunction: HashFunction


class SignRawPayloadRequest(TypedDict, total=False):
    type: str
    timestampMs: str
    organizationId: str
    parameters: SignRawPayloadIntentV2


class SignRawPayloadResult(TypedDict, total=False):
    r: str
    s: str
    v: str


class SignTransactionIntentV2(TypedDict, total=False):
    signWith: str
    unsignedTransaction: str
    type: TransactionType


class SignTransactionRequest(TypedDict, total=False):
    type: str
    timestampMs: str
    organizationId: str
    parameters: SignTransactionIntentV2


class SignTransactionResult(TypedDict, total=False):
    signedTransaction: str


class NOOPCodegenAnchorResponse(TypedDict, total=False):
    stamp: Dict[str, Any]


# Operation inputs and outputs


GetActivityBody = GetActivityRequest


GetActivityResponse = ActivityResponse


GetActivitiesBody = GetActivitiesRequest


GetOrganizationBody = GetOrganizationRequest


GetWhoamiBody = GetWhoamiRequest


GetWalletsBody = GetWalletsRequest


GetWalletAccountsBody = GetWalletAccountsRequest


ListPrivateKeyTagsBody = ListPrivateKeyTagsRequest


class ApproveActivityBody(ApproveActivityIntent, CommandOverrideParams, total=False):
    pass


class ApproveActivityResponse(Result, ActivityMetadata, total=False):
    pass


class RejectActivityBody(RejectActivityIntent, CommandOverrideParams, total=False):
    pass


class RejectActivityResponse(Result, ActivityMetadata, total=False):
    pass


class CreatePrivateKeysBody(CreatePrivateKeysIntentV2, CommandOverrideParams, total=False):
    pass


class CreatePrivateKeysResponse(CreatePrivateKeysResultV2, ActivityMetadata, total=False):
    pass


class CreateSubOrganizationBody(CreateSubOrganizationIntentV5, CommandOverrideParams, total=False):
    pass


class CreateSubOrganizationResponse(CreateSubOrganizationResultV5, ActivityMetadata, total=False):
    pass


class CreateUsersBody(CreateUsersIntentV2, CommandOverrideParams, total=False):
    pass


class CreateUsersResponse(CreateUsersResult, ActivityMetadata, total=False):
    pass


class CreateWalletBody(CreateWalletIntent, CommandOverrideParams, total=False):
    pass


class CreateWalletResponse(CreateWalletResult, ActivityMetadata, total=False):
    pass


class CreateWalletAccountsBody(CreateWalletAccountsIntent, CommandOverrideParams, total=False):
    pass


class CreateWalletAccountsResponse(CreateWalletAccountsResult, ActivityMetadata, total=False):
    pass


class DeleteUsersBody(DeleteUsersIntent, CommandOverrideParams, total=False):
    pass


class DeleteUsersResponse(DeleteUsersResult, ActivityMetadata, total=False):
    pass


class EmailAuthBody(EmailAuthIntent, CommandOverrideParams, total=False):
    pass


class EmailAuthResponse(EmailAuthResult, ActivityMetadata, total=False):
    pass


class InitUserEmailRecoveryBody(InitUserEmailRecoveryIntent, CommandOverrideParams, total=False):
    pass


class InitUserEmailRecoveryResponse(InitUserEmailRecoveryResult, ActivityMetadata, total=False):
    pass


class SignRawPayloadBody(SignRawPayloadIntentV2, CommandOverrideParams, total=False):
    pass


class SignRawPayloadResponse(SignRawPayloadResult, ActivityMetadata, total=False):
    pass


class SignTransactionBody(SignTransactionIntentV2, CommandOverrideParams, total=False):
    pass


class SignTransactionResponse(SignTransactionResult, ActivityMetadata, total=False):
    pass
