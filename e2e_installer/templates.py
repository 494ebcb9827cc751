"""Built-in install script templates."""

# Installs the container toolkit on a docker host by running the toolkit
# image against the host's docker daemon. The runtime hook symlink is
# required because docker checks for it at daemon init.
DOCKER_INSTALL_TEMPLATE = """
#! /usr/bin/env bash
set -xe

: ${IMAGE:={{ image }}}

# Create a temporary directory
TEMP_DIR="/tmp/ctk_e2e.$(date +%s)_$RANDOM"
mkdir -p "$TEMP_DIR"

sudo ln -s "$TEMP_DIR/toolkit/nvidia-container-runtime-hook" /usr/bin/nvidia-container-runtime-hook

docker run --pid=host --rm -i --privileged	\\
	-v /:/host	\\
	-v /var/run/docker.sock:/var/run/docker.sock	\\
	-v "$TEMP_DIR:$TEMP_DIR"	\\
	-v /etc/docker:/config-root	\\
	${IMAGE}	\\
	--root "$TEMP_DIR"	\\
	--runtime=docker	\\
	--config=/config-root/daemon.json	\\
	--driver-root=/	\\
	--no-daemon	\\
	--restart-mode=systemd
"""
