import pytest

from rustdrills.ownership import (
    JobStatus,
    favorite_snacks,
    fill_vec,
    greet,
    make_sausage,
    my_macro,
    offset_sums,
    run_jobs,
)


def test_fill_vec_from_empty():
    assert fill_vec([]) == [22, 44, 66]


def test_fill_vec_creates_its_own_list():
    assert fill_vec() == [22, 44, 66]


def test_fill_vec_leaves_input_untouched():
    original = [1, 2]
    filled = fill_vec(original)
    assert original == [1, 2]
    assert filled[:2] == original
    assert filled[2:] == [22, 44, 66]


def test_fill_vec_result_can_grow():
    vec1 = fill_vec([])
    vec1.append(88)
    assert vec1 == [22, 44, 66, 88]
    assert len(vec1) == 4


def test_offset_sums_first_five_cover_everything(capsys):
    numbers = list(range(100))
    sums = offset_sums(numbers, 8)
    assert len(sums) == 8
    assert sum(sums[:5]) == sum(numbers)
    out = capsys.readouterr().out
    assert "Sum of offset 0 is" in out
    assert "Sum of offset 7 is" in out


def test_offset_sums_beyond_stride_overlap():
    sums = offset_sums(list(range(100)), 8)
    # offsets 5..7 start one stride later than offsets 0..2
    for offset in range(5, 8):
        assert sums[offset] == sums[offset - 5] - (offset - 5)


def test_offset_sums_small_example():
    assert offset_sums([1, 2, 3, 4, 5, 6], 2) == [7, 2]


def test_offset_sums_zero_workers():
    assert offset_sums([1, 2, 3], 0) == []


def test_offset_sums_rejects_negative_workers():
    with pytest.raises(ValueError):
        offset_sums([1, 2, 3], -1)


def test_run_jobs_completes_all(capsys):
    status = run_jobs(10, 0.001)
    assert status.jobs_completed == 10
    assert "waiting... " in capsys.readouterr().out


def test_run_jobs_with_no_jobs():
    assert run_jobs(0, 0.001).jobs_completed == 0


def test_run_jobs_rejects_negative_count():
    with pytest.raises(ValueError):
        run_jobs(-1, 0.001)


def test_job_status_counts():
    status = JobStatus()
    for _ in range(3):
        status.complete()
    assert status.completed == 3
    assert status == JobStatus(jobs_completed=3)


def test_my_macro_without_arguments(capsys):
    assert my_macro() == "Check out my macro!"
    assert capsys.readouterr().out == "Check out my macro!\n"


def test_my_macro_with_argument(capsys):
    assert my_macro(7777) == "Look at this other macro: 7777"
    assert "Look at this other macro: 7777" in capsys.readouterr().out


def test_my_macro_rejects_two_arguments():
    with pytest.raises(TypeError):
        my_macro(1, 2)


def test_greet():
    assert greet("world!") == "Hello world!"


def test_make_sausage(capsys):
    make_sausage()
    assert capsys.readouterr().out == "sausage!\n"


def test_favorite_snacks(capsys):
    assert favorite_snacks() == ("Pear", "Cucumber")
    assert capsys.readouterr().out == "favorite snacks: Pear and Cucumber\n"