#!/usr/bin/env python3
"""
Cadastra um funcionário com acesso ao painel de solicitações.

Usage:
    python criar_funcionario.py "<nome>" <email> <senha>
"""

import asyncio
import sys

from sqlalchemy import select

from ssda.crypto import hash_password
from ssda.database import AsyncSessionLocal, close_db
from ssda.models import Employee


async def main():
    if len(sys.argv) != 4:
        print(__doc__.strip())
        sys.exit(1)

    nome, email, senha = sys.argv[1:4]

    async with AsyncSessionLocal() as db:
        existente = await db.execute(select(Employee).where(Employee.email == email))
        if existente.scalar_one_or_none() is not None:
            print(f"Erro: já existe um funcionário com o e-mail {email}.")
            sys.exit(1)

        funcionario = Employee(name=nome, email=email, password_hash=hash_password(senha))
        db.add(funcionario)
        await db.commit()
        print(f"Funcionário cadastrado: id={funcionario.id}, email={email}")

    await close_db()


if __name__ == "__main__":
    asyncio.run(main())
