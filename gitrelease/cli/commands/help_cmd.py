from __future__ import annotations

import typer

USAGE = """\
git-release <command>

Commands:
  help: show this message.

  prepare: update master, develop and tags from origin.

  version [amount]: show the current release version.
      amount (default 1): number of versions to show, newest first.

  previous [offset]: show a previous release version.
      offset (default 1): how many releases back from the latest.

  next [kind]: show the next release version for a kind of change
      (0.0.0 when nothing has been released yet).
      major: incompatible API changes.
      minor (default): backwards-compatible functionality.
      patch: backwards-compatible bug fixes.

  create [kind|version]: create the release with git-flow. 'kind' is the same
      as for 'next'. Any other string is used as the version verbatim; if it
      is not a semantic version, version/next will not see the release.

  issues [point_a] [point_b]: list ticket ids found in the subjects of the
      commits reachable from point_a but not from point_b. Points can be a
      commit hash, a branch or a tag.
      point_a (default: develop)
      point_b (default: output of 'version')
      'issues previous [n]' lists the ids of the release n steps back
      (default 0, the latest release).

  send: push develop, master and tags to origin.

  revert: undo the latest local release. develop and master are hard reset
      to origin, unpushed work on them is lost.

  deploy [kind|version] [--send]: prepare, list issues, create, and push
      when --send is given. 'deploy --send' means 'deploy minor --send'.
"""


def help_cmd() -> None:
    """Show usage."""
    typer.echo(USAGE)
