"""Demo page showing the accessible renderer on a real form."""
from __future__ import annotations

import logging

from django.shortcuts import redirect, render
from django.urls import reverse
from django.views.decorators.http import require_http_methods

from .forms import AddressForm

logger = logging.getLogger(__name__)


@require_http_methods(["GET", "POST"])
def address_form(request):
    """Show the address form; re-render it with inline errors until it validates."""

    if request.method == "POST":
        form = AddressForm(request.POST)
        if form.is_valid():
            return redirect(f"{reverse('a11yforms:address')}?saved=1")
        logger.info("Address form submitted with errors on: %s", ", ".join(sorted(form.errors)))
    else:
        form = AddressForm()

    return render(
        request,
        "a11yforms/address_form.html",
        {"form": form, "saved": request.GET.get("saved") == "1"},
    )
