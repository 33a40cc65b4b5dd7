"""Known git error codes.

The values mirror the error enumeration produced by the git subprocess
wrapper, so they must match it exactly.
"""

from __future__ import annotations

from enum import Enum

REPOSITORY_DOES_NOT_EXIST_ERROR_CODE = "repository-does-not-exist-error"
"""Code of the error raised when git is started in a path that does not exist."""


class GitErrorCode(str, Enum):
    """Errors recognized in git output."""

    SSH_KEY_AUDIT_UNVERIFIED = "ssh_key_audit_unverified"
    SSH_AUTHENTICATION_FAILED = "ssh_authentication_failed"
    SSH_PERMISSION_DENIED = "ssh_permission_denied"
    HTTPS_AUTHENTICATION_FAILED = "https_authentication_failed"
    REMOTE_DISCONNECTION = "remote_disconnection"
    HOST_DOWN = "host_down"
    REBASE_CONFLICTS = "rebase_conflicts"
    MERGE_CONFLICTS = "merge_conflicts"
    HTTPS_REPOSITORY_NOT_FOUND = "https_repository_not_found"
    SSH_REPOSITORY_NOT_FOUND = "ssh_repository_not_found"
    PUSH_NOT_FAST_FORWARD = "push_not_fast_forward"
    BRANCH_DELETION_FAILED = "branch_deletion_failed"
    DEFAULT_BRANCH_DELETION_FAILED = "default_branch_deletion_failed"
    REVERT_CONFLICTS = "revert_conflicts"
    EMPTY_REBASE_PATCH = "empty_rebase_patch"
    NO_MATCHING_REMOTE_BRANCH = "no_matching_remote_branch"
    NO_EXISTING_REMOTE_BRANCH = "no_existing_remote_branch"
    NOTHING_TO_COMMIT = "nothing_to_commit"
    NO_SUBMODULE_MAPPING = "no_submodule_mapping"
    SUBMODULE_REPOSITORY_DOES_NOT_EXIST = "submodule_repository_does_not_exist"
    INVALID_SUBMODULE_SHA = "invalid_submodule_sha"
    LOCAL_PERMISSION_DENIED = "local_permission_denied"
    INVALID_MERGE = "invalid_merge"
    INVALID_REBASE = "invalid_rebase"
    NON_FAST_FORWARD_MERGE_INTO_EMPTY_HEAD = "non_fast_forward_merge_into_empty_head"
    PATCH_DOES_NOT_APPLY = "patch_does_not_apply"
    BRANCH_ALREADY_EXISTS = "branch_already_exists"
    BAD_REVISION = "bad_revision"
    NOT_A_GIT_REPOSITORY = "not_a_git_repository"
    CANNOT_MERGE_UNRELATED_HISTORIES = "cannot_merge_unrelated_histories"
    LFS_ATTRIBUTE_DOES_NOT_MATCH = "lfs_attribute_does_not_match"
    BRANCH_RENAME_FAILED = "branch_rename_failed"
    PATH_DOES_NOT_EXIST = "path_does_not_exist"
    INVALID_OBJECT_NAME = "invalid_object_name"
    OUTSIDE_REPOSITORY = "outside_repository"
    LOCK_FILE_ALREADY_EXISTS = "lock_file_already_exists"
    NO_MERGE_TO_ABORT = "no_merge_to_abort"
    LOCAL_CHANGES_OVERWRITTEN = "local_changes_overwritten"
    UNRESOLVED_CONFLICTS = "unresolved_conflicts"
    GPG_FAILED_TO_SIGN_DATA = "gpg_failed_to_sign_data"
    CONFLICT_MODIFY_DELETED_IN_BRANCH = "conflict_modify_deleted_in_branch"
    PUSH_WITH_FILE_SIZE_EXCEEDING_LIMIT = "push_with_file_size_exceeding_limit"
    HEX_BRANCH_NAME_REJECTED = "hex_branch_name_rejected"
    FORCE_PUSH_REJECTED = "force_push_rejected"
    INVALID_REF_LENGTH = "invalid_ref_length"
    PROTECTED_BRANCH_REQUIRES_REVIEW = "protected_branch_requires_review"
    PROTECTED_BRANCH_FORCE_PUSH = "protected_branch_force_push"
    PROTECTED_BRANCH_DELETE_REJECTED = "protected_branch_delete_rejected"
    PROTECTED_BRANCH_REQUIRED_STATUS = "protected_branch_required_status"
    PUSH_WITH_PRIVATE_EMAIL = "push_with_private_email"
    CONFIG_LOCK_FILE_ALREADY_EXISTS = "config_lock_file_already_exists"
    REMOTE_ALREADY_EXISTS = "remote_already_exists"
    TAG_ALREADY_EXISTS = "tag_already_exists"
    MERGE_WITH_LOCAL_CHANGES = "merge_with_local_changes"
    REBASE_WITH_LOCAL_CHANGES = "rebase_with_local_changes"
    MERGE_COMMIT_NO_MAINLINE_OPTION = "merge_commit_no_mainline_option"
    UNSAFE_DIRECTORY = "unsafe_directory"
    PATH_EXISTS_BUT_NOT_IN_REF = "path_exists_but_not_in_ref"


# Errors caused by missing or rejected credentials. A private repository the
# user cannot see is reported by the host as "not found".
AUTHENTICATION_ERRORS: frozenset[GitErrorCode] = frozenset(
    {
        GitErrorCode.HTTPS_AUTHENTICATION_FAILED,
        GitErrorCode.SSH_AUTHENTICATION_FAILED,
        GitErrorCode.HTTPS_REPOSITORY_NOT_FOUND,
        GitErrorCode.SSH_REPOSITORY_NOT_FOUND,
    }
)


def is_authentication_error(code: GitErrorCode | None) -> bool:
    """Check if a git error code is authentication related.

    Args:
        code: The git error code, if any

    Returns:
        True if the code is one of AUTHENTICATION_ERRORS
    """
    return code is not None and code in AUTHENTICATION_ERRORS
