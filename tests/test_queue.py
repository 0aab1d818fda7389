from bank_queue.core import Customer, WaitingLine


def make_customers(n, minute=0):
    return [Customer(customer_id=i, arrival_minute=minute) for i in range(n)]


def test_new_line_is_empty():
    line = WaitingLine()
    assert line.is_empty()
    assert len(line) == 0
    assert line.pop_front() is None


def test_line_is_first_in_first_out():
    line = WaitingLine()
    for customer in make_customers(4):
        line.push_back(customer)

    assert not line.is_empty()
    assert [line.pop_front().customer_id for _ in range(4)] == [0, 1, 2, 3]
    assert line.is_empty()


def test_interleaved_push_and_pop_keeps_order():
    line = WaitingLine()
    a, b, c = make_customers(3)
    line.push_back(a)
    line.push_back(b)
    assert line.pop_front() is a
    line.push_back(c)
    assert list(line) == [b, c]


def test_longest_line_tracked():
    line = WaitingLine()
    for customer in make_customers(3):
        line.push_back(customer)
    line.pop_front()
    line.pop_front()
    line.push_back(Customer(customer_id=9, arrival_minute=1))

    assert line.max_length == 3
    assert len(line) == 2
