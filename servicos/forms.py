from __future__ import annotations
from decimal import Decimal, InvalidOperation

from django import forms

from .models import Servico


class ServicoForm(forms.ModelForm):
    """
    Form do painel:
      - valida unicidade de 'nome' sem diferenciar maiúsculas
      - duração entre 1 e 480 minutos
      - parsing de preço com vírgula
    """

    class Meta:
        model = Servico
        fields = ["nome", "duracao_min", "preco", "descricao", "imagem_url", "ativo"]
        labels = {
            "nome": "Nome do serviço",
            "duracao_min": "Duração (min)",
            "preco": "Preço (R$)",
            "descricao": "Descrição (opcional)",
            "imagem_url": "Imagem (URL)",
            "ativo": "Ativo",
        }
        help_texts = {
            "duracao_min": "Em minutos (ex.: 30, 45, 60). Define quantos horários o atendimento ocupa.",
            "preco": "Valor cobrado em reais. Usado também no PIX.",
        }

    # ======= Validações =======
    def clean_nome(self):
        nome = (self.cleaned_data.get("nome") or "").strip()
        if not nome:
            raise forms.ValidationError("Informe o nome do serviço.")
        qs = Servico.objects.filter(nome__iexact=nome)
        if self.instance.pk:
            qs = qs.exclude(pk=self.instance.pk)
        if qs.exists():
            raise forms.ValidationError("Já existe um serviço com esse nome.")
        return nome

    def clean_duracao_min(self):
        v = self.cleaned_data.get("duracao_min") or 0
        if v <= 0:
            raise forms.ValidationError("A duração deve ser maior que 0.")
        if v > 480:
            raise forms.ValidationError("Duração máxima permitida é 480 minutos.")
        return v

    def clean_preco(self):
        v = self.cleaned_data.get("preco")
        if isinstance(v, str):
            txt = v.strip().replace(",", ".")
            if not txt:
                return Decimal("0.00")
            try:
                v = Decimal(txt)
            except InvalidOperation:
                raise forms.ValidationError("Preço inválido.")
        if v is not None and v < 0:
            raise forms.ValidationError("O preço não pode ser negativo.")
        return v
