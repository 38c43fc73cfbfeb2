# configuracoes/forms.py
from __future__ import annotations

from django import forms

from core.contacts import normalize_msisdn_br
from core.pix import chave_pix_valida
from .models import ConfiguracaoSite


class ConfiguracaoSiteForm(forms.ModelForm):
    class Meta:
        model = ConfiguracaoSite
        fields = [
            "telefone", "instagram", "endereco", "banner_url",
            "pix_chave", "pix_recebedor", "pix_cidade",
        ]
        help_texts = {
            "telefone": "Número que recebe os agendamentos pelo WhatsApp (com DDD).",
            "pix_chave": "CPF, CNPJ, e-mail, telefone (+55...) ou chave aleatória.",
        }

    def clean_telefone(self):
        tel = (self.cleaned_data.get("telefone") or "").strip()
        if not tel:
            raise forms.ValidationError("Telefone é obrigatório.")
        norm = normalize_msisdn_br(tel)
        if not norm:
            raise forms.ValidationError("Telefone inválido. Use DDD + número.")
        return norm

    def clean_instagram(self):
        insta = (self.cleaned_data.get("instagram") or "").strip()
        if not insta:
            raise forms.ValidationError("Instagram é obrigatório.")
        return insta

    def clean_endereco(self):
        end = (self.cleaned_data.get("endereco") or "").strip()
        if not end:
            raise forms.ValidationError("Endereço é obrigatório.")
        return end

    def clean_pix_chave(self):
        chave = (self.cleaned_data.get("pix_chave") or "").strip()
        if not chave:
            return None
        if not chave_pix_valida(chave):
            raise forms.ValidationError(
                "Chave PIX inválida. Use CPF, CNPJ, email, telefone (+55...) ou chave aleatória (UUID)"
            )
        return chave
