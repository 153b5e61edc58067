"""Update Helm chart and helmfile dependency versions and open a pull request."""
