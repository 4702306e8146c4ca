"""Shell commands that prepare a target for a chef-solo run."""

from __future__ import annotations

from chef_sandbox.config import DEFAULT_OMNIBUS_URL, ProvisionerConfig

SHELL_HELPERS = """\
do_wget() {
  wget -O "$2" "$1" 2>/dev/null
}

do_curl() {
  curl -sL -o "$2" "$1" 2>/dev/null
}

do_fetch() {
  fetch -o "$2" "$1" 2>/dev/null
}

do_python() {
  python -c "import sys,urllib2 ; sys.stdout.write(urllib2.urlopen(sys.argv[1]).read())" "$1" > "$2"
}

exists() {
  if command -v $1 >/dev/null 2>&1
  then
    return 0
  else
    return 1
  fi
}

do_download() {
  echo "downloading $1"
  echo "  to file $2"

  if exists wget; then
    do_wget $1 $2 && return 0
  fi

  if exists curl; then
    do_curl $1 $2 && return 0
  fi

  if exists fetch; then
    do_fetch $1 $2 && return 0
  fi

  if exists python; then
    do_python $1 $2 && return 0
  fi

  echo ">>>>>> wget, curl, fetch, or python not found on this instance."
  return 16
}"""

COOKBOOK_DIRS = ("data_bags", "roles", "environments", "cookbooks", "data")


def sudo(config: ProvisionerConfig, script: str) -> str:
    return f"sudo -E {script}" if config.sudo else script


def install_command(config: ProvisionerConfig) -> str | None:
    """Return a script installing Chef Omnibus, or None when not requested.

    ``require_chef_omnibus`` is ``True`` (install once), ``"latest"`` (always
    reinstall) or a version string (reinstall unless already at it).
    """
    flag = config.require_chef_omnibus
    if not flag:
        return None

    url = config.chef_omnibus_url or DEFAULT_OMNIBUS_URL
    if isinstance(flag, str) and flag != "latest":
        version = f"-v {flag.lower()}"
    else:
        version = ""
    flag_text = "true" if flag is True else str(flag)

    # Bourne shell, bash is not present on every target
    return f"""sh -c '
{SHELL_HELPERS}

should_update_chef() {{
  case "{flag_text}" in
    true|`chef-solo -v | cut -d " " -f 2`) return 1 ;;
    latest|*) return 0 ;;
  esac
}}

if [ ! -d "/opt/chef" ] || should_update_chef ; then
  echo "-----> Installing Chef Omnibus ({flag_text})"
  do_download {url} /tmp/install.sh
  {sudo(config, "sh")} /tmp/install.sh {version}
fi'
"""


def init_command(config: ProvisionerConfig) -> str:
    root = config.root_path.rstrip("/") or "/"
    dirs = " ".join(f"{root}/{name}" for name in COOKBOOK_DIRS)
    return f"{sudo(config, 'rm')} -rf {dirs}"
