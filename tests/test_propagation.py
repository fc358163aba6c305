from sudoku_solver.csp import propagation
from sudoku_solver.csp.domains import cell_index, initialize_domains, is_complete
from sudoku_solver.csp.propagation import ac3, revise
from sudoku_solver.types import PropagationStats


def test_revise_removes_value_held_by_singleton_neighbor():
    domains = [set() for _ in range(81)]
    domains[0] = {1, 2}
    domains[1] = {1}
    assert revise(domains, 0, 1)
    assert domains[0] == {2}


def test_revise_keeps_supported_values():
    domains = [set() for _ in range(81)]
    domains[0] = {1, 2}
    domains[1] = {1, 2}
    assert not revise(domains, 0, 1)
    assert domains[0] == {1, 2}


def test_revise_can_empty_a_domain():
    domains = [set() for _ in range(81)]
    domains[0] = {4}
    domains[1] = {4}
    assert revise(domains, 0, 1)
    assert domains[0] == set()


def test_ac3_keeps_every_solution_value(classic_puzzle, classic_solution):
    domains = initialize_domains(classic_puzzle)
    assert ac3(domains)
    for row in range(9):
        for col in range(9):
            assert classic_solution[row][col] in domains[cell_index(row, col)]


def test_ac3_reaches_arc_consistency(classic_puzzle):
    domains = initialize_domains(classic_puzzle)
    assert ac3(domains)
    for xi, xj in propagation.generate_arcs():
        for v in domains[xi]:
            assert domains[xj] != {v}


def test_ac3_detects_duplicate_givens(duplicate_in_row):
    domains = initialize_domains(duplicate_in_row)
    assert not ac3(domains)


def test_ac3_does_not_detect_pigeonhole(pigeonhole_board):
    domains = initialize_domains(pigeonhole_board)
    assert ac3(domains)
    assert domains[0] == {1, 2}
    assert domains[1] == {1, 2}
    assert domains[2] == {1, 2}


def test_ac3_on_empty_board_changes_nothing(empty_grid):
    domains = initialize_domains(empty_grid)
    stats = PropagationStats()
    assert ac3(domains, stats=stats)
    assert all(len(dom) == 9 for dom in domains)
    assert stats.revisions == 1620
    assert stats.removals == 0


def test_ac3_on_complete_board(classic_solution):
    domains = initialize_domains(classic_solution)
    assert ac3(domains)
    assert is_complete(domains)


def test_domains_never_grow_during_ac3(classic_puzzle, monkeypatch):
    domains = initialize_domains(classic_puzzle)
    sizes = [len(dom) for dom in domains]
    original_revise = propagation.revise

    def checked_revise(doms, xi, xj):
        changed = original_revise(doms, xi, xj)
        for idx, dom in enumerate(doms):
            assert len(dom) <= sizes[idx]
            sizes[idx] = len(dom)
        return changed

    monkeypatch.setattr(propagation, "revise", checked_revise)
    assert ac3(domains)


def test_deduplicated_queue_gives_same_domains(classic_puzzle):
    deduped = initialize_domains(classic_puzzle)
    plain = initialize_domains(classic_puzzle)
    stats_deduped = PropagationStats()
    stats_plain = PropagationStats()

    assert ac3(deduped, stats=stats_deduped, deduplicate=True)
    assert ac3(plain, stats=stats_plain, deduplicate=False)
    assert deduped == plain
    assert stats_deduped.removals == stats_plain.removals
    assert stats_deduped.revisions <= stats_plain.revisions
