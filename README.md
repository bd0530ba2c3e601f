# linkedkit

Linked data structures for Python that let you work with the nodes directly:

- `LinkedList` (`linkedkit.linkedlist`): a singly linked list with `head` and `tail`.
- `DoublyLinkedList` (`linkedkit.dlist`): a doubly linked list with `head` and `tail`.
  Its nodes (`DListNode`) have `is_head()` and `is_tail()`.
- `CircularList` (`linkedkit.clist`): a singly linked circular list.
- `CircularDoublyLinkedList` (`linkedkit.cdlist`): a doubly linked circular list.
- `Stack` (`linkedkit.stack`) and `Queue` (`linkedkit.linked_queue`): both built on `LinkedList`.

Every list supports `len()`. Iterating over a list yields the stored items from
the head, and `nodes()` yields the nodes themselves. Each insert method returns
the node it created.

Each list takes an optional `destroy` callback. `destroy()` empties the list
and calls the callback once for every item it removes.

## Install

```
pip install .
```

## Usage

```python
from linkedkit.linkedlist import LinkedList
from linkedkit.dlist import DoublyLinkedList
from linkedkit.stack import Stack

lst = LinkedList()
lst.insert_next(None, 1)          # None inserts at the head
lst.insert_next(lst.tail, 2)      # insert after the tail node
print(list(lst))                  # [1, 2]
print(lst.remove_next(None))      # removes the head: 1

dl = DoublyLinkedList()
dl.insert_next(None, "a")         # None is allowed only while the list is empty
dl.insert_prev(dl.head, "b")
print(list(dl))                   # ['b', 'a']
dl.remove(dl.tail)

stack = Stack()
stack.push(10)
stack.push(20)
print(stack.peek())               # 20
print(stack.pop())                # 20
```

`Stack.peek()` returns `None` when the stack is empty, and `Stack.pop()` raises
`ListError` in that case.

`Queue.enqueue()` and `Queue.dequeue()` both work at the head of the list, so
the item enqueued last is dequeued first. `Queue.dequeue()` and `Queue.peek()`
return `None` when the queue is empty.

For `CircularList`, `remove_next(node)` removes the node after `node`. When
`node` is the only node, it removes `node` itself.

If the structure does not allow an operation, it raises `ListError` (from
`linkedkit.linkedlist`). This happens when you:

- remove from an empty list
- remove after the tail of a `LinkedList`
- pass `None` as the node while a doubly linked or circular list is not empty

## Demo commands

Each command builds a structure, changes it step by step and prints it after
every step. Each node is printed with its object id and the id of the node it
links to.

```
linkedkit-list-demo
linkedkit-dlist-demo
linkedkit-stack-demo
linkedkit-float-stack-demo 1.5 2.25 3 4
```

`linkedkit-float-stack-demo` pushes each number given on the command line onto
a stack and then pops two of them. It therefore needs at least two numbers. A
step that raises `ListError` ends the run with exit status 1.

## Tests

```
pip install .[test]
pytest
```