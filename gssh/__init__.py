"""gssh - interactive picker for SSH sessions on gcloud compute instances."""

__version__ = "0.1.0"
