from unicjk.util.language_helpers import is_cjk


def cjk_runs(s: str) -> list[tuple[bool, str]]:
    runs = []
    buffer = []
    buffer_is_cjk = False

    def empty_buffer():
        if buffer:
            runs.append((buffer_is_cjk, "".join(buffer)))
        buffer.clear()

    for c in s:
        c_is_cjk = is_cjk(c)
        if buffer and c_is_cjk != buffer_is_cjk:
            empty_buffer()
        buffer_is_cjk = c_is_cjk
        buffer.append(c)
    empty_buffer()
    return runs
