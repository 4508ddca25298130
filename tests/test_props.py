import threading

from threadlab import props


def test_policy_names_for_known_policies():
    assert props.policy_name(props.SCHED_FIFO) == "SCHED_FIFO"
    assert props.policy_name(props.SCHED_RR) == "SCHED_RR"
    assert props.policy_name(props.SCHED_OTHER) == "SCHED_OTHER"


def test_policy_name_unknown():
    assert props.policy_name(-12345) == "???"


def test_current_thread_info_identifies_caller():
    info = props.current_thread_info()
    assert info.ident == threading.get_ident()
    assert info.native_id == threading.get_native_id()
    assert info.priority >= 0
    assert info.policy_label == props.policy_name(info.policy)


def test_default_attributes_are_joinable_and_sized():
    attrs = props.default_attributes()
    assert attrs.detach_state == "PTHREAD_CREATE_JOINABLE"
    assert attrs.inherit_sched == "PTHREAD_INHERIT_SCHED"
    assert attrs.stack_addr is None
    assert attrs.stack_size > 0
    assert attrs.guard_size > 0
    assert attrs.sched_policy == props.SCHED_OTHER


def test_run_prop_logs_every_attribute(capsys):
    attrs = props.run_prop()
    err = capsys.readouterr().err
    logged = [line for line in err.splitlines() if "default:" in line]
    assert attrs == props.default_attributes()
    assert len(logged) == len(attrs.lines())
    assert any(attrs.detach_state in line for line in logged)


def test_run_create_reports_two_distinct_threads(capsys):
    main_info, child_info = props.run_create(0.05)
    assert main_info.ident == threading.get_ident()
    assert child_info.ident != main_info.ident
    err = capsys.readouterr().err
    assert f"child thread ({child_info.ident})" in err
    assert f"main thread ({main_info.ident})" in err