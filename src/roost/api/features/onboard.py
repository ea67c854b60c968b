from roost.api import schemas
from roost.routing import RouteGroup, get, post

TAGS = ("Onboarding",)


def routes() -> RouteGroup:
    return RouteGroup(
        "/onboard",
        (
            get(
                "/hello",
                "onboard.hello",
                "Check Onboarding Status",
                tags=TAGS,
                responses={200: schemas.OnboardingStatus},
            ),
            post(
                "/complete",
                "onboard.complete",
                "Complete Onboarding",
                tags=TAGS,
                request=schemas.CompleteOnboarding,
                responses={200: schemas.User},
            ),
        ),
        name="onboard",
    )
