from novachain.demo import lock, propose, send


def test_propose_prints_single_line(capsys):
    propose()
    out = capsys.readouterr().out
    assert out.splitlines() == ["共识打包区块"]


def test_lock_prints_amount_then_proposes(capsys):
    lock(7)
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["桥锁住 币: 7", "共识打包区块"]


def test_send_chains_through_bridge_and_consensus(capsys):
    send(10)
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["钱包发送 币: 10", "桥锁住 币: 10", "共识打包区块"]


def test_send_uses_given_amount_everywhere(capsys):
    send(123)
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert lines[0].endswith(": 123")
    assert lines[1].endswith(": 123")