"""Account management, mounted under ``/auth/account``."""

from roost.api import schemas
from roost.routing import RouteGroup, get, patch, post, put

TAGS = ("Account",)


def routes() -> RouteGroup:
    return RouteGroup(
        "/auth/account",
        (
            post(
                "/create",
                "account.create_account",
                "Create Account",
                tags=TAGS,
                request=schemas.CreateAccount,
                responses={204: None},
            ),
            post("/reverify", "account.resend_verification", "Resend Verification", tags=TAGS),
            put("/delete", "account.confirm_deletion", "Confirm Account Deletion", tags=TAGS),
            post("/delete", "account.delete_account", "Delete Account", tags=TAGS),
            get(
                "/",
                "account.fetch_account",
                "Fetch Account",
                tags=TAGS,
                responses={200: schemas.AccountInfo},
            ),
            patch(
                "/change/password",
                "account.change_password",
                "Change Password",
                tags=TAGS,
                request=schemas.ChangePassword,
                responses={204: None},
            ),
            patch(
                "/change/email",
                "account.change_email",
                "Change Email",
                tags=TAGS,
                request=schemas.ChangeEmail,
                responses={204: None},
            ),
            post("/verify/{code}", "account.verify_email", "Verify Email", tags=TAGS),
            post(
                "/reset_password",
                "account.send_password_reset",
                "Send Password Reset",
                tags=TAGS,
                responses={204: None},
            ),
            patch(
                "/reset_password",
                "account.password_reset",
                "Password Reset",
                tags=TAGS,
                request=schemas.PasswordReset,
                responses={204: None},
            ),
        ),
        name="account",
    )
