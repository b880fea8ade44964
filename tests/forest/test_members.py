"""Tests for member list and aggregate."""

from disjoint_forest.forest.members import Aggregate, MemberList


class TestMemberList:
    """Test MemberList splicing."""

    def test_empty(self):
        """Test empty list."""
        members = MemberList()
        assert members.is_empty()
        assert list(members) == []

    def test_append_keeps_order(self):
        """Test append preserves insertion order."""
        members = MemberList(3)
        members.append(1)
        members.append(2)
        assert list(members) == [3, 1, 2]

    def test_splice_moves_nodes(self):
        """Test splice appends other and drains it."""
        left, right = MemberList(1), MemberList(4)
        left.append(2)
        right.append(5)

        left.splice(right)

        assert list(left) == [1, 2, 4, 5]
        assert right.is_empty()
        assert list(right) == []

    def test_splice_into_empty(self):
        """Test splice into an empty list takes over head and tail."""
        left, right = MemberList(), MemberList(7)
        left.splice(right)
        left.append(8)
        assert list(left) == [7, 8]

    def test_splice_empty_and_self(self):
        """Test splicing nothing or itself changes nothing."""
        members = MemberList(1)
        members.splice(MemberList())
        members.splice(members)
        assert list(members) == [1]

    def test_append_after_splice(self):
        """Test the tail follows the spliced list."""
        left, right = MemberList(1), MemberList(2)
        left.splice(right)
        left.append(3)
        assert list(left) == [1, 2, 3]
        assert "MemberList([1, 2, 3])" == repr(left)


class TestAggregate:
    """Test Aggregate merge."""

    def test_singleton(self):
        """Test a new aggregate holds its own id."""
        aggregate = Aggregate(5)
        assert aggregate.size == 1
        assert aggregate.member_ids() == (5,)

    def test_merge(self):
        """Test sizes add and members concatenate."""
        a, b, c = Aggregate(1), Aggregate(2), Aggregate(3)
        b.merge(c)
        a.merge(b)

        assert a.size == 3
        assert a.member_ids() == (1, 2, 3)
        assert b.size == 0
        assert b.member_ids() == ()
