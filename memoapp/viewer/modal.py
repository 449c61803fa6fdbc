from __future__ import annotations
from typing import Callable

from memoapp.memos.schemas import MemoOut
from .display import MemoView, build_view
from .requestor import CancelToken, SummaryRequestor
from .state import SummaryState

DELETE_CONFIRM_MESSAGE = "정말로 이 메모를 삭제하시겠습니까?"


class MemoViewer:
    """Modal that shows one memo and hosts its summarize button.

    Editing and deleting are delegated to the owner through callbacks.
    """

    def __init__(
        self,
        requestor: SummaryRequestor,
        on_close: Callable[[], None],
        on_edit: Callable[[MemoOut], None],
        on_delete: Callable[[str], None],
    ):
        self.requestor = requestor
        self._on_close = on_close
        self._on_edit = on_edit
        self._on_delete = on_delete
        self.memo: MemoOut | None = None
        self.is_open = False
        # page scrolling is blocked while the modal is up
        self.scroll_locked = False

    @property
    def state(self) -> SummaryState:
        return self.requestor.state

    def set_memo(self, memo: MemoOut | None) -> None:
        self.memo = memo
        self.requestor.load(memo)

    def open(self, memo: MemoOut) -> None:
        self.set_memo(memo)
        self.is_open = True
        self.scroll_locked = True

    def close(self) -> None:
        self.is_open = False
        self.scroll_locked = False

    def handle_key(self, key: str) -> None:
        if self.is_open and key == "Escape":
            self._on_close()

    def handle_backdrop_click(self, on_backdrop: bool) -> None:
        # clicks inside the dialog bubble up with on_backdrop=False
        if on_backdrop:
            self._on_close()

    def edit(self) -> None:
        if self.memo:
            self._on_edit(self.memo)

    def delete(self, confirm: Callable[[str], bool]) -> bool:
        if self.memo and confirm(DELETE_CONFIRM_MESSAGE):
            self._on_delete(self.memo.id)
            self._on_close()
            return True
        return False

    def summarize(self, cancel: CancelToken | None = None) -> SummaryState:
        if not self.memo:
            return self.state
        return self.requestor.summarize(cancel)

    def render(self) -> MemoView | None:
        if not self.is_open or not self.memo:
            return None
        return build_view(self.memo, self.state)
