# coursenet

A small social network kept in a plain text file, an interactive menu for
editing it, and a handful of classic data-structure tools: undirected and
directed graphs with breadth- and depth-first search, a grid reachability
check, and a bag with quicksort.

## Installing

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## The network file

The first line holds the number of users. Each user then takes five lines:
the id, and then, each indented by a tab, the full name, the birth year, the
zip code and the ids of the user's friends separated by spaces.

    2
    0
    	Jason Chen
    	2000
    	94087
    	1 
    1
    	Issac Boone
    	1999
    	94305
    	0 

## Commands

Open a network file in the interactive menu:

    coursenet users.txt

The menu lets you add a user, add or remove a friendship between two users
(named by first and last name), write the network back to the file, or quit
by choosing any number of 5 or more.

Print a file with spaces shown as `.` and tabs shown as `>`, handy for
checking the indentation of a network file (`users.txt` if no file is named):

    coursenet-showfile users.txt

## Library use

    from coursenet.network import Network, UnknownUserError

    network = Network()
    network.read_users("users.txt")
    print(network.num_users())
    network.add_connection("Jason Chen", "Issac Boone")
    network.write_users("users.txt")

`add_connection` and `delete_connection` raise `UnknownUserError` when either
name is not in the network; `get_user` and `get_id` return `None` when nothing
matches.

Graphs use vertices numbered from 0:

    from coursenet.graph import Graph

    g = Graph()
    for _ in range(5):
        g.add_vertex()
    g.add_edge(0, 1)
    g.add_edge(1, 2)
    g.add_edge(2, 3)
    print(g.shortest_path(0, 3))
    print(g.shortest_path_length(0, 3))
    print(g.bfs_order(0))
    print(g.diameter())

`Graph` also offers `dfs_order`, `dfs_recursive_order`, `edge_list`,
`are_adjacent`, `delete_edge` and `vertices_at_distance`.

Also available: `coursenet.digraph.Digraph` with `can_reach`,
`coursenet.grid.can_cross` for a grid of solid and lava squares, and
`coursenet.bag.DynamicBag` with `coursenet.bag.quicksort`.

## What it does not do

There is no tool here for turning hex text into raw bytes; the package covers
the network, the graphs, the grid and the bag only.