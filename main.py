import os
import sys

# Section header prefix the report is split on
DELIM = "&-=-&"

ROOT = os.path.abspath(os.path.dirname(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

try:
    from DoublyLinkedList import DoublyLinkedList
except Exception as e:
    print("Failed to import DoublyLinkedList:", e)
    sys.exit(2)


def print_section(name: str):
    print(f"{DELIM} {name}")


def print_list(lst: "DoublyLinkedList", label: str = "", reverse: bool = False):
    if label:
        print(f"{label}: ", end="")
    vs = lst.to_list(reverse=reverse)
    print(f"[{' '.join(map(str, vs))}] size={lst.size()}")


def print_values(vs, label: str):
    print(f"{label}: [{' '.join(map(str, vs))}]")


# ───────────────────────── tasks ─────────────────────────

def task1_append_traverse():
    print_section("start-task1")

    lst = DoublyLinkedList()
    print_section("empty-list")
    print(f"empty={lst.empty()} size={lst.size()}")
    print_values(list(lst), "traversal")

    print_section("append")
    for i in range(1, 20):
        lst.append(i)
    print_list(lst, "after-append")
    print(f"front={lst.front()} back={lst.back()}")

    print_section("traverse")
    print_values(list(lst), "first-pass")
    print_values(list(lst), "second-pass")


def task2_contains():
    print_section("start-task2")

    lst = DoublyLinkedList(range(1, 20))
    print_list(lst, "seed")

    print_section("contains")
    for v in (3, 19, 20, 21):
        print(f"contains({v})={lst.contains(v)}")

    print_section("in-operator")
    print(f"1 in lst={1 in lst} 0 in lst={0 in lst}")

    print_section("empty-contains")
    print(f"contains(1)={DoublyLinkedList().contains(1)}")


def task3_cursor_lifecycle():
    print_section("start-task3")

    lst = DoublyLinkedList([10, 20, 30])
    print_list(lst, "seed")

    print_section("partial-traversal")
    print(f"next={next(lst)}")

    print_section("append-while-iterating")
    lst.append(40)
    print_values(list(lst), "rest")

    print_section("exhausted")
    print_values(list(lst), "after-exhaustion")

    print_section("append-after-exhaustion")
    lst.append(50)
    lst.append(60)
    print_values(list(lst), "resumed")

    print_section("values")
    print_values(list(lst.values()), "values-1")
    print_values(list(lst.values()), "values-2")

    print_section("reverse")
    print_list(lst, "backward", reverse=True)


# ───────────────────────── entry ─────────────────────────

def main():
    which = sys.argv[1] if len(sys.argv) >= 2 else ""
    if which == "task1":
        task1_append_traverse(); return 0
    if which == "task2":
        task2_contains(); return 0
    if which == "task3":
        task3_cursor_lifecycle(); return 0
    # default: run all
    task1_append_traverse()
    task2_contains()
    task3_cursor_lifecycle()
    return 0


if __name__ == "__main__":
    sys.exit(main())
