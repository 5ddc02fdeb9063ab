from ra_board.errors import NotFoundError
from ra_board.models.application import Application, RejectionDraft
from ra_board.models.posting import JobPosting
from ra_board.models.user import User


class BoardStore:
    """Owns the board's canonical in-memory collections.

    The services never mutate these; routers pass them in and swap in the
    collections the services return. Everything is lost on restart.
    """

    def __init__(self):
        self.users: dict[str, User] = {}
        self.postings: list[JobPosting] = []
        self.applications: list[Application] = []
        self.rejection_drafts: dict[str, RejectionDraft] = {}  # application id -> draft
        self.saved: dict[str, tuple[str, ...]] = {}  # student id -> post ids

    def reset(self):
        self.users = {}
        self.postings = []
        self.applications = []
        self.rejection_drafts = {}
        self.saved = {}

    def load(
        self,
        users: list[User],
        postings: list[JobPosting],
        applications: list[Application],
    ):
        self.users = {u.id: u for u in users}
        self.postings = list(postings)
        self.applications = list(applications)

    def get_user(self, user_id: str) -> User:
        try:
            return self.users[user_id]
        except KeyError:
            raise NotFoundError(f"User {user_id!r} not found") from None


board_store = BoardStore()
