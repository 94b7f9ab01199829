# bendkit

`bendkit` is a library of compiler passes for programs that compile down
to interaction nets. It works on an in-memory net book, a named collection
of nets in which each net is a root tree plus a bag of redexes. It also
provides the syntax tree of an imperative surface language, together with
two rewriting passes over it.

Install it with `pip install .`. To run the tests, install the extra with
`pip install .[test]` and then run `pytest`.

## Net AST and display: `bendkit.hvm_ast`

- The tree nodes are `Var`, `Ref`, `Era`, `Num`, `Con`, `Dup`, `Opr` and
  `Swi`. A net is built from `Redex` (a priority flag and two trees) and
  `Net` (a root and an `rbag` list). A `Book` holds a `defs` dict from
  names to nets.
- `tree_children(tree)` returns the two subtrees of a binary node, or an
  empty tuple for a leaf. `net_trees(net)` yields the root and then both
  sides of every redex.
- `display_hvm_tree`, `display_hvm_net` and `display_hvm_book` render the
  text form that the runtime reads.
- `display_hvm_numb(raw)` renders a raw 32-bit number. The result is an
  unsigned value, a signed value with its sign, a float (`+inf`, `-inf` and
  `+NaN` are written out), an operator symbol such as `[+]`, or a partially
  applied operator such as `[*3]`.

## Passes over a book

All of these passes change their argument in place.

- `bendkit.eta_reduce.eta_reduce_hvm_net(net)` rewrites
  `{x y} ... {x y}` pairs into a single wire and turns `(* *)` into `*`.
- `bendkit.inline.inline_hvm_book(book)` looks for definitions that have no
  redexes and whose root is a leaf (`should_inline`). It replaces
  references to them with that leaf, following chains of such references.
  It returns the set of definition names it changed. If the references
  loop forever, it raises `InlineError`.
- `bendkit.prune.prune_hvm_book(book, entrypoints)` deletes every
  definition that cannot be reached from the given entry points.
- `bendkit.net_size.count_nodes(net)` counts the binary nodes of a net.
  `check_net_sizes(book)` raises `NetSizeError` when any definition has
  more than `MAX_NET_SIZE` (64) nodes. The error's `errors` attribute maps
  each such definition to its message.
- `bendkit.recursive_priority.add_recursive_priority(book)` works on each
  recursion cycle. When a definition has more than one redex against the
  next definition in its cycle, it marks those redexes as priority. The
  helpers `dependencies(net)` and `cycles(deps)` are public as well.
- `bendkit.mutual_recursion.Graph.from_book(book)` builds the graph of
  active references.
  - `Graph.add` and `Graph.get` edit and query the graph.
  - `Graph.cycles()` lists its cycles.
  - `show_cycles(cycles, separator)` formats up to five cycles for a
    message. It expands merged names that are joined by `separator`, using
    `combinations_from_merges`.

## Readback net: `bendkit.inet`

`hvm_to_net(net)` converts a net into an `INet`, a list of `Node`s with
three `Port`s each. Node 0 is the root node, and `ROOT` is its port.

- Walk the result with `INet.node`, `INet.enter_port`, `Node.port`,
  `INet.link` and `INet.set`.
- A node's kind is a `NodeKind`, which holds a `NodeTag` together with a
  `CtrKind`, a definition name or a number.
- `CtrKind.to_lab()` returns the runtime label. It raises `ValueError` for
  labelled kinds that are not supported.

## Options: `bendkit.options` and `bendkit.cli_opts`

- `CompileOpts` is a frozen dataclass of pass switches. By default eta and
  float-combinators are on, linearize-matches is at `OptLevel.ENABLED`, and
  the encoding is `AdtEncoding.NUM_SCOTT`.
  - `set_all()` and `set_no_all()` return copies with every optimizing pass
    turned on or off.
  - `strict_warnings()` lists the warnings that apply to strict mode.
- `RunOpts` holds `linear_readback` and `pretty`.
- `parse_opt_args(values)` parses option names such as `all`, `no-eta` or
  `adt-scott`. A single value may hold several names separated by spaces.
  The result is a list of `OptArg`, and an unknown name raises
  `ValueError`.
- `compile_opts_from_cli(args)` applies a list of `OptArg`, in order, on
  top of the defaults.

## Running: `bendkit.runner`

`run_hvm(book, cmd)` writes the book to `.out.hvm` and runs
`hvm <cmd> .out.hvm`. An `hvm` executable must be on `PATH`.

- Output before the `Result: ` marker goes to standard output.
- The call returns the text that follows the marker.
- It removes the file afterwards.
- It raises `HvmRunError` when the file cannot be written, the program
  cannot be started, or no marker appears.

`filter_hvm_output(stream, output)` does the splitting on any pair of
binary streams.

## Imperative front-end

- `bendkit.imp_ast` defines the language's pieces:
  - expressions such as `Var`, `Call`, `Lam`, `Bin`, `Lst`, `Constructor`,
    `Comprehension`, `MapInit` and `MapGet`;
  - assignment patterns such as `PatVar`, `PatTup`, `PatSup` and `MapSet`;
  - statements such as `Assign`, `InPlace`, `If`, `Match`, `Switch`,
    `Bend`, `Fold`, `Do`, `Ask`, `Return`, `Open` and `Use`;
  - the top-level items `Definition`, `Variant` and `EnumDef`.
- `bendkit.map_get.gen_map_get(definition)` lifts each `m[k]` read into a
  `(map/get%N, m) = Map/get(m, k)` binding placed before the statement
  that uses it. `substitute_map_gets(expr, ids)` does the same for a single
  expression.
- `bendkit.order_kwargs.order_kwargs(definition, signatures)` turns the
  named arguments of calls and constructors into positional ones, in the
  order given by `signatures` (a mapping from a name to its parameter
  names). It raises `KwargsError` in these cases:
  - the argument count is wrong;
  - a named argument is missing;
  - a named argument is unexpected;
  - a constructor is unknown;
  - named arguments are passed to a variable or an expression.

## Typical pipeline

1. Build a `Book`.
2. Apply `eta_reduce_hvm_net` to each net.
3. Check for cycles with `Graph.from_book(book).cycles()`.
4. Call `inline_hvm_book`, `prune_hvm_book` and `check_net_sizes`, as
   your `CompileOpts` ask.
5. Finish with `add_recursive_priority`.
6. Emit the result with `display_hvm_book`, or run it with `run_hvm`.

## What it does not do

`bendkit` has no command-line program. It also has these gaps:

- It has no parser for source files or for the imperative syntax, so you
  build trees and books in code.
- It has no desugaring from the imperative AST to a functional term
  language, and no compilation from terms to nets.
- It cannot parse the runtime's result text back into a net, or read an
  `INet` back into a term.